"""
FairLock — справедливая (FIFO) взаимоисключающая блокировка

threading.Lock не гарантирует порядок выдачи владения ожидающим потокам,
поэтому при постоянной конкуренции отдельный поток может голодать.
FairLock выдаёт владение строго в порядке запросов:
- Свободная блокировка без очереди захватывается сразу
- Иначе поток встаёт в очередь и ждёт, пока не окажется первым
- Новый поток не может обогнать очередь после release()

Блокировка нереентерабельна и без таймаута.
"""

import threading
from collections import deque
from typing import Deque, Optional


class FairLock:
    """FIFO mutex поверх threading.Condition."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._waiters: Deque[object] = deque()
        self._held = False
        self._owner: Optional[int] = None

    def acquire(self) -> None:
        """
        Захват блокировки (блокирующий, без таймаута).

        Raises:
            RuntimeError: Если поток уже владеет блокировкой
        """
        me = threading.get_ident()
        with self._cond:
            if self._held and self._owner == me:
                raise RuntimeError("FairLock is not reentrant")

            if not self._held and not self._waiters:
                self._take(me)
                return

            ticket = object()
            self._waiters.append(ticket)
            try:
                while self._held or self._waiters[0] is not ticket:
                    self._cond.wait()
            except BaseException:
                # Прерванный поток покидает очередь, не блокируя следующих
                self._waiters.remove(ticket)
                self._cond.notify_all()
                raise

            self._waiters.popleft()
            self._take(me)

    def release(self) -> None:
        """
        Raises:
            RuntimeError: Если блокировка не захвачена текущим потоком
        """
        with self._cond:
            if not self._held or self._owner != threading.get_ident():
                raise RuntimeError("Cannot release un-acquired FairLock")
            self._held = False
            self._owner = None
            self._cond.notify_all()

    def locked(self) -> bool:
        with self._cond:
            return self._held

    def queue_length(self) -> int:
        """Число потоков, ожидающих в очереди."""
        with self._cond:
            return len(self._waiters)

    def _take(self, owner: int) -> None:
        self._held = True
        self._owner = owner

    def __enter__(self) -> "FairLock":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
