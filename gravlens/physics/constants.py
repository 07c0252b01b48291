# gravlens/physics/constants.py
# ---------------------------------------------------------------
# Числовые параметры модели фотона и трассировки.
# Все расстояния – в тех же единицах, что и rs.
# ---------------------------------------------------------------

# −1.5·rs·h²/r⁵ – коэффициент «силы» в приближённой модели.
FIELD_COEFFICIENT = -1.5

# r < 0.1·rs → производная замораживается (нулевая).
SINGULARITY_FACTOR = 0.1

# Захват горизонтом: r² < (1.1·rs)².
CAPTURE_MARGIN = 1.1

# Дальняя зона: r² > 1000² – направление считаем окончательным.
ESCAPE_RADIUS = 1000.0

MAX_STEPS = 2000

# Адаптивный шаг: (порог в единицах rs, шаг); проверяются по порядку.
DEFAULT_STEP = 0.5
NEAR_STEP = 0.1
NEAR_RADIUS_FACTOR = 10.0
CLOSE_STEP = 0.02
CLOSE_RADIUS_FACTOR = 3.0
