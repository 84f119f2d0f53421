from django.apps import AppConfig


class MlmConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'mlm'
