"""Scenes, a registry that builds them by name, and the manager that swaps them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from trinkit.scene_transition import SceneTransition


class Scene(ABC):
    """A game scene driven by a ``SceneManager``."""

    name: str = ""

    @abstractmethod
    def init(self) -> None:
        """Prepare the scene before its first update."""

    @abstractmethod
    def update(self, manager: SceneManager) -> None:
        """Advance the scene by one frame."""


class SceneFactory:
    """Creates scenes from registered names."""

    def __init__(self) -> None:
        self._classes: dict[str, type[Scene]] = {}

    def register(self, name: str, scene_class: type[Scene]) -> None:
        """Make ``scene_class`` available under ``name``."""
        if not (isinstance(scene_class, type) and issubclass(scene_class, Scene)):
            raise TypeError("scene_class must be a Scene subclass")
        self._classes[name] = scene_class

    def create(self, name: str) -> Scene:
        """Build a new scene; raises ``KeyError`` for an unknown name."""
        try:
            scene_class = self._classes[name]
        except KeyError:
            raise KeyError(f"no scene registered under {name!r}") from None
        return scene_class()


class SceneManager:
    """Runs the current scene and swaps it under a transition."""

    def __init__(
        self,
        factory: SceneFactory,
        first_scene_name: str,
        transition: SceneTransition | None = None,
    ) -> None:
        self.factory = factory
        self.is_scene_switching = False
        self.next_scene_name = ""
        self.current_scene: Scene | None = None
        self._load_scene(first_scene_name)
        self.current_scene.init()
        self.transition = transition if transition is not None else SceneTransition()

    @property
    def current_scene_name(self) -> str:
        """Name of the running scene, or an empty string if none."""
        return self.current_scene.name if self.current_scene is not None else ""

    def update(self, delta_time: float) -> None:
        """Update the current scene and then the transition."""
        if self.current_scene is None:
            raise RuntimeError("the scene manager has been finalized")
        self.current_scene.update(self)
        self.transition.update(delta_time)

    def switch_scene(self) -> None:
        """Load the next scene once the transition has covered the screen."""
        if self.transition.is_begin_transition_finished:
            self.is_scene_switching = True
            self.transition.reset_begin_transition()
        if self.is_scene_switching:
            self._load_scene(self.next_scene_name)

    def init_next_scene(self) -> None:
        """Initialise a freshly loaded scene."""
        if self.is_scene_switching:
            self.current_scene.init()
            self.is_scene_switching = False

    def set_next_scene(self, scene_name: str) -> None:
        """Request a change to ``scene_name`` and start the transition."""
        self.next_scene_name = scene_name
        self.transition.start()

    def finalize(self) -> None:
        """Drop the current scene."""
        self.current_scene = None

    def _load_scene(self, scene_name: str) -> None:
        self.current_scene = None
        self.current_scene = self.factory.create(scene_name)