from django.apps import AppConfig


class IncidentsConfig(AppConfig):
    name = 'incidents'
    verbose_name = 'Incident dashboard'
