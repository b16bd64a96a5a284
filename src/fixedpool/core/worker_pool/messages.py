"""Messages carried by the shared worker queue."""
from dataclasses import dataclass
from typing import Callable, Union

# A job is any zero-argument callable; its return value is ignored.
Job = Callable[[], object]


@dataclass(frozen=True)
class NewJob:
    """A unit of work waiting to be claimed by exactly one worker."""
    job: Job


class Terminate:
    """Tells the worker that receives it to leave its loop."""

    def __repr__(self) -> str:
        return "Terminate()"


# Terminate carries no payload, so a single instance is shared.
TERMINATE = Terminate()

Message = Union[NewJob, Terminate]
