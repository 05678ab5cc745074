import os

from dotenv import load_dotenv
load_dotenv()


class Config:
    # ======= DATABASE =======
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///fitlife.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # ======= JWT =======
    # Tokens are issued by the auth service; this API only verifies them.
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY")
    JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_NAME = "Authorization"
    JWT_HEADER_TYPE = "Bearer"

    # ======= APP =======
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    DEFAULT_ANALYTICS_DAYS = int(os.environ.get("DEFAULT_ANALYTICS_DAYS", 30))
    MAX_ANALYTICS_DAYS = int(os.environ.get("MAX_ANALYTICS_DAYS", 365))
    APP_NAME = "FitLife API"
    APP_VERSION = "1.0.0"
