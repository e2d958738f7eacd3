import importlib
import logging

from config import get_settings_module

from visitor_log import create_app

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

app = create_app()

if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(host=getattr(settings, "HOST", "127.0.0.1"), port=int(getattr(settings, "PORT", 5000)))
