from django.contrib import admin
from config.models import Option

@admin.register(Option)
class OptionAdmin(admin.ModelAdmin):
  list_display = ("name", "value", "description")
  search_fields = ("name", "value")
