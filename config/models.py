from django.db import models


class Option(models.Model):
  """
  A named key/value pair holding one configured value of the site.
  """
  name = models.CharField(max_length=191, unique=True)
  value = models.TextField(blank=True)
  description = models.CharField(max_length=500, blank=True)

  class Meta:
      ordering = ["name"]
      verbose_name = "Option"
      verbose_name_plural = "Options"

  def __str__(self):
      return f"{self.name} = {self.value}"
