# gmath3d/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# Все операции gmath3d чистые, поэтому пакет независимых преобразований
# (например, поворот всех вершин меша) можно раздать потокам без
# синхронизации – нужен только сбор результатов в исходном порядке.
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor
import queue

from gmath3d.utils.config import Config
from gmath3d.utils.logger import logger


class TaskPool:
    """Пул готового количества потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        if max_workers is None:
            max_workers = Config()["multithread"].get("max_workers")
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self.tasks = queue.Queue()
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        future = self.executor.submit(fn, *args, **kwargs)
        self.tasks.put(future)
        return future

    def map(self, fn, items, chunk_size=None):
        """
        Применить `fn` к каждому элементу, порядок результатов сохраняется.
        Элементы режутся на пачки по `chunk_size` (по умолчанию multithread.min_batch).
        """
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        items = list(items)
        if chunk_size is None:
            chunk_size = Config()["multithread"].get("min_batch", 64)
        chunk_size = max(1, int(chunk_size))
        chunks = [items[n:n + chunk_size] for n in range(0, len(items), chunk_size)]
        # futures локальные: очередь self.tasks – только для submit/wait_all
        futures = [self.executor.submit(_apply_chunk, fn, chunk) for chunk in chunks]
        logger.debug(f"[TaskPool] {len(items)} items in {len(chunks)} chunks")
        results = []
        for future in futures:
            results.extend(future.result())
        return results

    def wait_all(self):
        """Блокировать до завершения всех поставленных задач."""
        while not self.tasks.empty():
            future = self.tasks.get()
            future.result()  # пробрасывает исключения, если они возникли

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()


def _apply_chunk(fn, chunk):
    return [fn(item) for item in chunk]
