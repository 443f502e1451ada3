import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    MONGO_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/legal_assist")
    DATABASE_NAME = os.getenv("DATABASE_NAME")
    GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
    GEMINI_BASE_URL = os.getenv(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
    GEMINI_ANALYSIS_MODEL = os.getenv("GEMINI_ANALYSIS_MODEL", "gemini-1.5-pro")
    GEMINI_CHAT_MODEL = os.getenv("GEMINI_CHAT_MODEL", "gemini-1.5-flash")
    GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", 60))
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 5000))
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "./uploads/")
    LOG_DIR = os.getenv("LOG_DIR", "./logs/")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv(
        "ALLOWED_ORIGINS", "*").split(",") if origin.strip()]
