"""
Configuración de logging

Se llama una vez al arrancar la app (lifespan en main.py).
Después, cada módulo usa logging.getLogger(__name__).
"""

import logging
import sys


def configure_logging(log_level: str = "INFO") -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )

    root = logging.getLogger()
    root.setLevel(level)
    # Evito handlers duplicados si se reinicia la app (ej: uvicorn --reload)
    root.handlers = [handler]

    # httpx loguea cada request en INFO, demasiado ruido
    logging.getLogger("httpx").setLevel(logging.WARNING)
