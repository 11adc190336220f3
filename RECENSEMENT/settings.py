"""
Django settings for RECENSEMENT project.
"""

from pathlib import Path
import os

from dotenv import load_dotenv

# ============
# Chemins
# ============
BASE_DIR = Path(__file__).resolve().parent.parent

# ============
# .env
# ============
load_dotenv(BASE_DIR / ".env")

def env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in {"1", "true", "yes", "on"}

def env_list(name: str, default: str = "") -> list[str]:
    raw = os.getenv(name, default)
    if not raw:
        return []
    return [x.strip() for x in raw.split(",") if x.strip()]

# ============
# Sécurité & debug
# ============
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-secret-unsafe")
DEBUG = env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = env_list("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1")

# ============
# Apps
# ============
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # 3rd-party
    "rest_framework",
    "rest_framework.authtoken",

    # Apps projet (serveur central)
    "Referentiel",
    "Contribuable",
    "Parcelle",
    "authentification",

    # Poste de saisie (export hors-ligne -> serveur central)
    "synchro_terrain",
]

# ============
# Middleware
# ============
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# ============
# Templates
# ============
ROOT_URLCONF = "RECENSEMENT.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "RECENSEMENT.wsgi.application"

# ============
# Base de données
# ============
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("DB_NAME", "RECENSEMENT_DB"),
        "USER": os.getenv("DB_USER", "postgres"),
        "PASSWORD": os.getenv("DB_PASSWORD", ""),
        "HOST": os.getenv("DB_HOST", "localhost"),
        "PORT": os.getenv("DB_PORT", "5432"),
    }
}

# ============
# Auth
# ============
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# ============
# Internationalisation
# ============
LANGUAGE_CODE = "fr"
TIME_ZONE = os.getenv("TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

# ============
# Fichiers statiques & médias
# ============
STATIC_URL = "static/"

MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "media"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# un lot de 20 fiches peut porter plusieurs photos chacune
DATA_UPLOAD_MAX_NUMBER_FILES = int(os.getenv("DATA_UPLOAD_MAX_NUMBER_FILES", "500"))

# ============
# REST Framework
# ============
API_AUTH_REQUIRED = env_bool("API_AUTH_REQUIRED", False)

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.TokenAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated"
        if API_AUTH_REQUIRED
        else "rest_framework.permissions.AllowAny",
    ],
}

# ============
# Logging
# ============
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": os.getenv("LOG_LEVEL", "INFO")},
}

# ============
# Recensement : serveur central
# ============
RECENSEMENT_UPLOAD_DIR = Path(os.getenv("RECENSEMENT_UPLOAD_DIR", str(BASE_DIR / "uploads")))

# ============
# Recensement : poste de saisie
# ============
RECENSEMENT_SERVER_URL = os.getenv("RECENSEMENT_SERVER_URL", "http://127.0.0.1:8080")
RECENSEMENT_HTTP_TIMEOUT = int(os.getenv("RECENSEMENT_HTTP_TIMEOUT", "60"))  # secondes
RECENSEMENT_EXPORT_CHUNK_SIZE = int(os.getenv("RECENSEMENT_EXPORT_CHUNK_SIZE", "20"))
RECENSEMENT_EMAIL = os.getenv("RECENSEMENT_EMAIL", "")
RECENSEMENT_PASSWORD = os.getenv("RECENSEMENT_PASSWORD", "")
RECENSEMENT_API_TOKEN = os.getenv("RECENSEMENT_API_TOKEN", "")

# ============
# Celery
# ============
from celery.schedules import crontab

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://127.0.0.1:6379/0")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://127.0.0.1:6379/1")
CELERY_TASK_ALWAYS_EAGER = env_bool("CELERY_TASK_ALWAYS_EAGER", True)  # True en DEV si pas de worker

CELERY_BEAT_SCHEDULE = {
    "export-contribuables-every-30min": {
        "task": "synchro_terrain.tasks.export_contribuables_task",
        "schedule": crontab(minute="*/30"),
    },
    "export-parcelles-every-30min": {
        "task": "synchro_terrain.tasks.export_parcelles_task",
        "schedule": crontab(minute="*/30"),
    },
    "sync-referentiels-daily": {
        "task": "synchro_terrain.tasks.sync_referentiels_task",
        "schedule": crontab(minute=0, hour=6),
    },
}
