import functools
import logging
import threading
import time
from collections import Counter
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fixedpool import __version__
from fixedpool.config import config
from fixedpool.core.worker_pool import Pool, PoolSizeError
from fixedpool.utils.logging import setup_logging

# Create CLI app
app = typer.Typer(
    name="fixedpool",
    help="Fixed-size worker pool",
    add_completion=False
)

console = Console()
logger = logging.getLogger(__name__)


class DemoTracker:
    """Records which thread ran each demo job and the peak concurrency seen."""

    def __init__(self):
        self._lock = threading.Lock()
        self.active = 0
        self.peak = 0
        self.completed: List[int] = []
        self.per_thread: Counter = Counter()

    def run(self, ordinal: int, delay: float) -> None:
        with self._lock:
            self.active += 1
            self.peak = max(self.peak, self.active)

        time.sleep(delay)

        with self._lock:
            self.active -= 1
            self.completed.append(ordinal)
            self.per_thread[threading.current_thread().name] += 1


@app.callback()
def callback():
    """Fixed-size worker pool."""
    setup_logging()


@app.command()
def demo(
    size: Optional[int] = typer.Option(
        None, "--size", "-s", help="Number of worker threads (defaults to POOL_SIZE)"
    ),
    jobs: int = typer.Option(10, "--jobs", "-j", help="Number of jobs to submit"),
    delay: float = typer.Option(0.1, "--delay", "-d", help="Seconds each job sleeps"),
):
    """Run sleeping jobs through a pool and report how they were spread."""
    if size is None:
        size = config.pool.size

    try:
        pool = Pool(size, thread_name_prefix=config.pool.thread_name_prefix)
    except PoolSizeError as e:
        print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    tracker = DemoTracker()
    started = time.monotonic()
    with pool:
        for ordinal in range(jobs):
            pool.submit(functools.partial(tracker.run, ordinal, delay))
    elapsed = time.monotonic() - started

    table = Table(title=f"{jobs} jobs on {size} workers")
    table.add_column("Thread")
    table.add_column("Jobs", justify="right")
    for name, count in sorted(tracker.per_thread.items()):
        table.add_row(name, str(count))
    console.print(table)

    print(f"Completed: {len(tracker.completed)}/{jobs}")
    print(f"Peak concurrency: {tracker.peak}")
    print(f"Elapsed: {elapsed:.2f}s")


@app.command()
def info():
    """Show the effective configuration."""
    message = f"""
[bold cyan]fixedpool[/bold cyan] {__version__}

Pool size: {config.pool.size}
Thread name prefix: {config.pool.thread_name_prefix}
Log level: {config.logging.level}
Log directory: {config.logging.log_dir}
    """
    console.print(Panel(message, title="Configuration", expand=False))


if __name__ == "__main__":
    app()
