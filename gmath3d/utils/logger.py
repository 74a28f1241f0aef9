# gmath3d/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер + проверка численных результатов для отладки.
# ---------------------------------------------------------------

import logging

import numpy as np


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("GMath3D")

logger = init_logger()

def check_finite(values, context: str = "") -> bool:
    """Проверить, что все компоненты конечны; если нет – записать в лог (DEBUG)."""
    finite = bool(np.all(np.isfinite(values)))
    if not finite:
        logger.debug(f"Non-finite result [{context}]")
    return finite
