# gravlens/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер, общий для всего пакета.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("gravlens")


logger = init_logger()
