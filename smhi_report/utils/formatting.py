from decimal import Decimal
from typing import Union

def format_value(value: Union[float, Decimal], decimals: int = 1) -> str:
    """Fixed-point rendering with a comma decimal separator, e.g. 4.1 -> '4,1'."""
    return f"{value:.{decimals}f}".replace(".", ",")
