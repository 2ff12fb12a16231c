import os

SECRET_KEY = os.getenv("SECRET_KEY")

SITE_NAME = os.getenv("SITE_NAME", "Tuitility")

# Upload ceiling for document text extraction (word counter)
MAX_DOCUMENT_BYTES = int(os.getenv("MAX_DOCUMENT_BYTES", str(50 * 1024 * 1024)))
MAX_CONTENT_LENGTH = MAX_DOCUMENT_BYTES + 1024 * 1024

# Remote media resolution (short-video downloader tools)
RAPIDAPI_KEY = os.getenv("RAPIDAPI_KEY")
MEDIA_API_URL = os.getenv(
    "MEDIA_API_URL",
    "https://instagram-downloader-download-instagram-videos-stories1.p.rapidapi.com/get-info-rapidapi",
)
MEDIA_API_TIMEOUT = float(os.getenv("MEDIA_API_TIMEOUT", "15"))

# Search results shown per page
SEARCH_PAGE_SIZE = int(os.getenv("SEARCH_PAGE_SIZE", "8"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
