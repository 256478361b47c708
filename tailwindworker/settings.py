import dj_database_url
import logging
from pathlib import Path
from decouple import config  # for loading environment variables
from dotenv import load_dotenv

load_dotenv()


# --- BASE SETTINGS ---
BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = config("SECRET_KEY", default="insecure-secret-for-dev")

DEBUG = config("DEBUG", default=True, cast=bool)

ALLOWED_HOSTS = ["*"]  # Update for production

PYTHON_ENVIRONMENT = config("PYTHON_ENVIRONMENT", default="development").lower()

# --- INSTALLED APPS ---
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party
    'rest_framework',
    'corsheaders',
    'django_celery_results',

    'worker.apps.WorkerConfig',
]

# --- MIDDLEWARE ---
MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',  # must be before CommonMiddleware
    'django.middleware.common.CommonMiddleware',

    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'tailwindworker.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'tailwindworker.wsgi.application'

# --- DATABASE ---
DATABASES = {
    'default': dj_database_url.config(
        default=config('DATABASE_URL', default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
        conn_max_age=600,
        ssl_require=config('DATABASE_SSL_REQUIRE', default=False, cast=bool),
    )
}

# --- PASSWORDS / AUTH ---
AUTH_PASSWORD_VALIDATORS = []

# --- INTERNATIONALIZATION ---
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# --- STATIC FILES ---
STATIC_URL = 'static/'

# --- JOB STORAGE ---
LOCAL_STORAGE_DIR = config('LOCAL_STORAGE_DIR', default=str(BASE_DIR / 'var' / 'tasks'))

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
    'jobs': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
        'OPTIONS': {
            'location': LOCAL_STORAGE_DIR,
            'file_permissions_mode': 0o644,
            'directory_permissions_mode': 0o755,
        },
    },
}

# --- COMPILER ---
TAILWINDCSS_BINARY = config('TAILWINDCSS_BINARY', default=str(BASE_DIR / 'bin' / 'tailwindcss'))
TAILWINDCSS_VERSION = config('TAILWINDCSS_VERSION', default='3.2.4')
COMPILER_TIMEOUT = config('COMPILER_TIMEOUT', default=60, cast=float)

CALLER_AGENT_MATCHER = config('CALLER_AGENT_MATCHER', default='worker.callers.WordPressAgentMatcher')

# "sync" writes the profile before responding, "async" hands it to Celery
TELEMETRY_MODE = config('TELEMETRY_MODE', default='sync')

HOMEPAGE_URL = config('HOMEPAGE_URL', default='https://tailwindcss.oxyrealm.com')

# --- DEFAULT PRIMARY KEY ---
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# --- REST FRAMEWORK CONFIG ---
REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
}

# --- CORS ---
CORS_ALLOW_ALL_ORIGINS = True  # WordPress sites call from arbitrary origins

# --- CELERY ---
CELERY_BROKER_URL = config('REDIS_URL', default='redis://localhost:6379/0')
CELERY_RESULT_BACKEND = 'django-db'
CELERY_TASK_ALWAYS_EAGER = config('CELERY_TASK_ALWAYS_EAGER', default=False, cast=bool)
CELERY_WORKER_MAX_TASKS_PER_CHILD = 100  # Recycle workers periodically

if PYTHON_ENVIRONMENT != 'development':
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('celery').setLevel(logging.WARNING)
    logging.getLogger('kombu').setLevel(logging.WARNING)
