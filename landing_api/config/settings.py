import os
from dotenv import load_dotenv
from pathlib import Path

# First get the environment from ENV variable or default to 'development'
ENV = os.getenv('ENV', 'development')

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Load the appropriate .env file based on environment
def load_env_file():
    # First try to load .env.{ENV} file
    env_file = BASE_DIR / f".env.{ENV}"
    if env_file.exists():
        load_dotenv(dotenv_path=env_file, override=True)
        return env_file

    # Fallback to the standard .env file
    default_env_file = BASE_DIR / ".env"
    if default_env_file.exists():
        load_dotenv(dotenv_path=default_env_file, override=True)
        return default_env_file

    return None

# Load environment variables
env_file_loaded = load_env_file()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ('true', '1', 'yes', 'on')


# Main
title=os.getenv("LANDING_API_TITLE", "Research Publication Landing API")
description=os.getenv("LANDING_API_DESCRIPTION", "Contact form relay and site metadata for the publication landing page")
version=os.getenv("LANDING_API_VERSION", "1.0.0")

API_V1_STR=os.getenv('LANDING_API_V1_STR', '/api/v1')
HOST=os.getenv('LANDING_API_HOST', '0.0.0.0')
PORT=int(os.getenv('LANDING_API_PORT', '8000'))
LOG_LEVEL=os.getenv('LANDING_API_LOG_LEVEL', 'INFO').upper()
DEBUG=_as_bool(os.getenv('LANDING_API_DEBUG', 'false'))

# Frontend origins allowed to post the contact form (comma-separated)
CORS_ORIGINS=[
    origin.strip()
    for origin in os.getenv(
        'LANDING_API_CORS_ORIGINS',
        'http://localhost:3000,http://127.0.0.1:3000,https://www.ab-ai.ca',
    ).split(',')
    if origin.strip()
]

# Mailjet transactional email
MAILJET_API_KEY=os.getenv('MAILJET_API_KEY')
MAILJET_SECRET_KEY=os.getenv('MAILJET_SECRET_KEY')
MAILJET_API_URL=os.getenv('MAILJET_API_URL', 'https://api.mailjet.com/v3.1/send')
MAILJET_TIMEOUT=float(os.getenv('MAILJET_TIMEOUT', '30'))

# "mailjet" or "console" (logs the message instead of sending it)
EMAIL_PROVIDER=os.getenv('EMAIL_PROVIDER', 'mailjet').strip().lower()

# Contact form identities
EMAIL_FROM=os.getenv('EMAIL_FROM')
EMAIL_FROM_NAME=os.getenv('EMAIL_FROM_NAME', 'Contact Form')
EMAIL_TO=os.getenv('EMAIL_TO')
EMAIL_TO_NAME=os.getenv('EMAIL_TO_NAME', 'Alberta AI')

# Re-apply the client-side length/format rules on the server
CONTACT_STRICT_VALIDATION=_as_bool(os.getenv('CONTACT_STRICT_VALIDATION', 'false'))

# Public site URL used by the manifest, robots and sitemap
SITE_BASE_URL=os.getenv('SITE_BASE_URL', 'https://www.ab-ai.ca').rstrip('/')
