from django.urls import path, re_path

from . import views

urlpatterns = [
    path('spaceapi', views.spaceapi, name='spaceapi_root'),
    re_path(r'^spaceapi/(?P<fragment>.*)$', views.spaceapi, name='spaceapi'),
    path('spaceapi-settings/', views.settings_page, name='spaceapi_settings'),
]
