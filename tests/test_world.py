import pygame

from spaceprojeckt.actor import Actor
from spaceprojeckt.stage import GameStage
from spaceprojeckt.world import World


class FakeApp:
    def __init__(self, size=(600, 980)):
        self.size = size

    def window_size(self):
        return self.size


class RecordingActor(Actor):
    def __init__(self, world, label="", texture_path=""):
        super().__init__(world, texture_path)
        self.label = label
        self.begun = 0
        self.ticks = []
        self.rendered = []

    def begin_play(self):
        self.begun += 1

    def tick(self, delta_time):
        self.ticks.append(delta_time)

    def render(self, surface):
        self.rendered.append(surface)


class RecordingStage(GameStage):
    def __init__(self, world, name, events):
        super().__init__(world)
        self.name = name
        self.events = events

    def start_stage(self):
        self.events.append(("start", self.name))

    def tick_stage(self, delta_time):
        self.events.append(("tick", self.name, delta_time))


class StagedWorld(World):
    def __init__(self, application, names):
        super().__init__(application)
        self.names = names
        self.events = []
        self.begin_calls = 0
        self.all_finished = 0

    def begin_play(self):
        self.begin_calls += 1

    def init_game_stage(self):
        for name in self.names:
            self.add_stage(RecordingStage(self, name, self.events))

    def all_game_stage_finished(self):
        self.all_finished += 1


def test_spawned_actor_waits_until_next_tick():
    world = World(FakeApp())
    actor = world.spawn_actor(RecordingActor, "a")
    assert world.pending_actors == (actor,)
    assert world.actors == ()
    assert actor.begun == 0

    world.tick_internal(0.5)
    assert world.actors == (actor,)
    assert world.pending_actors == ()
    assert actor.begun == 1
    assert actor.ticks == [0.5]


def test_spawn_actor_passes_world_and_arguments():
    world = World(FakeApp())
    actor = world.spawn_actor(RecordingActor, label="ship")
    assert actor.world is world
    assert actor.label == "ship"


def test_destroyed_actor_is_not_ticked():
    world = World(FakeApp())
    actor = world.spawn_actor(RecordingActor)
    world.tick_internal(0.1)
    actor.destroy()
    world.tick_internal(0.2)
    assert actor.ticks == [0.1]


def test_clean_cycle_removes_destroyed_actors():
    world = World(FakeApp())
    keep = world.spawn_actor(RecordingActor)
    drop = world.spawn_actor(RecordingActor)
    world.tick_internal(0.1)
    drop.destroy()
    world.run_clean_cycle()
    assert world.actors == (keep,)


def test_render_reaches_every_actor():
    world = World(FakeApp())
    first = world.spawn_actor(RecordingActor)
    second = world.spawn_actor(RecordingActor)
    world.tick_internal(0.1)
    surface = pygame.Surface((8, 8))
    world.render(surface)
    assert first.rendered == [surface]
    assert second.rendered == [surface]


def test_window_size_comes_from_application():
    world = World(FakeApp((321, 123)))
    assert world.window_size() == (321, 123)


def test_begin_play_starts_first_stage_once():
    world = StagedWorld(FakeApp(), ["one", "two"])
    World.begin_play_internal(world)
    World.begin_play_internal(world)
    assert world.begin_calls == 1
    assert world.has_begun_play
    assert world.current_stage_index == 0
    assert world.events == [("start", "one")]


def test_finishing_stage_advances_to_next():
    world = StagedWorld(FakeApp(), ["one", "two"])
    World.begin_play_internal(world)
    GameStage.finish_stage(world.stages[0])
    assert world.current_stage_index == 1
    assert world.events == [("start", "one"), ("start", "two")]
    assert world.all_finished == 0

    GameStage.finish_stage(world.stages[1])
    assert world.all_finished == 1


def test_no_stages_reports_all_finished():
    world = StagedWorld(FakeApp(), [])
    World.begin_play_internal(world)
    assert world.all_finished == 1
    assert world.current_stage_index == 0


def test_current_stage_is_ticked():
    world = StagedWorld(FakeApp(), ["one", "two"])
    World.begin_play_internal(world)
    World.tick_internal(world, 0.25)
    assert ("tick", "one", 0.25) in world.events
    assert not any(event[0] == "tick" and event[1] == "two" for event in world.events)


def test_clean_cycle_removes_finished_stages():
    world = StagedWorld(FakeApp(), ["one", "two"])
    World.begin_play_internal(world)
    first, second = world.stages
    GameStage.finish_stage(first)
    World.run_clean_cycle(world)
    assert world.stages == (second,)