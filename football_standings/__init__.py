import logging
import os

_level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

if not logging.getLogger().handlers:
    logging.basicConfig(
        level=_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

logging.getLogger(__name__).setLevel(_level)

# upstream HTTP client chatter stays at WARNING
for _noisy in ("urllib3", "requests"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
