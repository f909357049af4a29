import time
import threading
from typing import Optional

class SystemClock:
    def now_ms(self) -> int:
        return int(time.time() * 1000)

    def delay(self, seconds: float, cancel: Optional[threading.Event] = None) -> bool:
        """Sleep for `seconds`. Returns True if the wait was cut short by `cancel`."""
        if cancel is None:
            time.sleep(seconds)
            return False
        return cancel.wait(seconds)
