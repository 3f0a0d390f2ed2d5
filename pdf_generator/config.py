import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    # --- Fonts ---
    # Relative font paths are resolved against this directory
    FONT_DIR = os.getenv("PDF_FONT_DIR", ".")

    # --- Page Defaults ---
    DEFAULT_PAPER_SIZE = os.getenv("PDF_DEFAULT_PAPER_SIZE", "A4")
