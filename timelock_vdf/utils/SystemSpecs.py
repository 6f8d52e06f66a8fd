"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining how many worker processes to use."""

    @staticmethod
    def get_num_parallel_processes(jobs: int = 0) -> int:
        """
        Number of worker processes for batches of independent VDF instances.

        The CPU count is divided by PARALLELISM_DIVISOR (default 2). When the
        batch size is known the pool is never larger than the batch.

        Args:
            jobs: Size of the batch, or 0 if unknown

        Returns:
            int: Number of parallel processes to use, at least 1
        """
        parallelism_divisor = max(
            EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR), 1
        )
        workers = multiprocessing.cpu_count() // parallelism_divisor or 1
        if jobs > 0:
            workers = min(workers, jobs)
        return workers
