import pytest

from trinkit.scenes import Scene, SceneFactory, SceneManager


class _RecordingScene(Scene):
    def __init__(self):
        self.init_calls = 0
        self.updated_by = []

    def init(self):
        self.init_calls += 1

    def update(self, manager):
        self.updated_by.append(manager)


class TitleScene(_RecordingScene):
    name = "Title"


class GameScene(_RecordingScene):
    name = "Game"


@pytest.fixture
def factory():
    f = SceneFactory()
    f.register("Title", TitleScene)
    f.register("Game", GameScene)
    return f


@pytest.fixture
def manager(factory):
    return SceneManager(factory, "Title")


def _cover_screen(manager):
    manager.update(manager.transition.fade_out_time + 0.1)
    manager.update(manager.transition.wait_time + 0.1)


def test_factory_creates_registered_scene(factory):
    scene = factory.create("Game")
    assert isinstance(scene, GameScene)
    assert scene.init_calls == 0


def test_factory_rejects_unknown_name(factory):
    with pytest.raises(KeyError):
        factory.create("Missing")


def test_factory_rejects_non_scene_class(factory):
    with pytest.raises(TypeError):
        factory.register("Bad", dict)


def test_manager_starts_with_initialised_first_scene(manager):
    assert isinstance(manager.current_scene, TitleScene)
    assert manager.current_scene.init_calls == 1
    assert manager.current_scene_name == "Title"


def test_update_passes_manager_to_scene(manager):
    manager.update(0.016)
    assert manager.current_scene.updated_by == [manager]


def test_set_next_scene_starts_transition(manager):
    manager.set_next_scene("Game")
    assert manager.next_scene_name == "Game"
    assert manager.transition.is_transition is True


def test_switch_before_screen_covered_keeps_scene(manager):
    manager.set_next_scene("Game")
    manager.update(0.1)
    manager.switch_scene()
    assert isinstance(manager.current_scene, TitleScene)
    assert manager.is_scene_switching is False


def test_switch_and_init_next_scene(manager):
    manager.set_next_scene("Game")
    _cover_screen(manager)
    manager.switch_scene()
    assert isinstance(manager.current_scene, GameScene)
    assert manager.current_scene.init_calls == 0
    assert manager.transition.is_begin_transition_finished is False

    manager.init_next_scene()
    assert manager.current_scene.init_calls == 1
    assert manager.is_scene_switching is False

    manager.init_next_scene()
    assert manager.current_scene.init_calls == 1


def test_init_next_scene_without_switch_does_nothing(manager):
    manager.init_next_scene()
    assert manager.current_scene.init_calls == 1


def test_finalize_drops_scene(manager):
    manager.finalize()
    assert manager.current_scene is None
    assert manager.current_scene_name == ""
    with pytest.raises(RuntimeError):
        manager.update(0.016)