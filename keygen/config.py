import os
from dotenv import load_dotenv
load_dotenv()

LOG_LEVEL = os.getenv("KEYGEN_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("KEYGEN_LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s")
