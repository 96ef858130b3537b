import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///line_notify.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # LINE Messaging API channel credentials (required at startup)
    CHANNEL_ACCESS_TOKEN = os.environ.get('CHANNEL_ACCESS_TOKEN')
    CHANNEL_SECRET = os.environ.get('CHANNEL_SECRET')
    LINE_API_BASE_URL = os.environ.get('LINE_API_BASE_URL', 'https://api.line.me')
    # Outbound push timeout (seconds)
    LINE_TIMEOUT_SEC = float(os.environ.get('LINE_TIMEOUT_SEC', '10'))
    # Comma-separated list of origins allowed to call the API from a browser
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS',
        'http://localhost:5173,http://127.0.0.1:5173',
    ).split(',') if o.strip()]
