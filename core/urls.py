from django.contrib import admin
from django.urls import path, include

from core.settings import STRING_TO_ADMIN_PATH

urlpatterns = [
    path(STRING_TO_ADMIN_PATH, admin.site.urls),
    path('', include('spaceapi.urls')),
]
