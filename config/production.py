import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
