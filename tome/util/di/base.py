"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-memory fakes
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider carrying swap metadata.

    ``__mock_component__`` names the component a base provider stands for
    (None on concrete providers). ``__is_mock__`` marks the test double
    among its subclasses.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
