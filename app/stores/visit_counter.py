import asyncio


class VisitCounter:

    """
    进程级访问计数，只在内存中，重启归零。
    读-改-写全部在锁内完成，锁内不做任何 I/O。
    """

    def __init__(self, start: int = 0):
        self._count = start
        self._lock = asyncio.Lock()

    @property
    def value(self) -> int:
        return self._count

    async def increment(self) -> int:
        async with self._lock:
            self._count += 1
            return self._count
