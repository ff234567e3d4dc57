import random

import pytest

from mazequest.entities.collectible import Collectible, PowerUp, powerup_label
from mazequest.entities.particle import GameEvent, ParticleSystem
from mazequest.entities.player import PlayerAnimation
from mazequest.game.camera import Camera
from mazequest.game.hud import hud_snapshot


def test_event_defaults_follow_kind():
    event = GameEvent('win', 7.5, 7.5)
    assert event.count == 80
    assert event.color == (255, 204, 0)

    assert GameEvent('move', 0.5, 0.5).count == 8
    assert GameEvent('catch', 0.5, 0.5, count=3).count == 3


def test_particles_burst_fade_and_die():
    system = ParticleSystem(random.Random(5))
    system.emit(GameEvent('key', 2.5, 3.5))
    assert len(system) == 15

    system.update()
    assert all(p.life < 1.0 for p in system.particles)

    for _ in range(100):
        system.update()
    assert len(system) == 0


def test_animation_progress_clamps():
    animation = PlayerAnimation(0.5, 0.5)
    animation.start(0.5, 1.5)

    assert not animation.update(0.7)
    assert animation.update(0.7)
    assert animation.progress == 1.0
    assert animation.y == pytest.approx(1.5)
    assert not animation.update(0.7)


def test_camera_eases_toward_target():
    camera = Camera(cell_size=10, smoothing=0.5)
    camera.snap(0.5, 0.5)
    camera.follow(2.5, 0.5)

    assert camera.target_x == 20
    camera.update()
    assert camera.x == 10
    camera.update()
    assert camera.x == 15


def test_item_types_are_validated():
    with pytest.raises(ValueError):
        Collectible(0.5, 0.5, 'coin')
    with pytest.raises(ValueError):
        PowerUp(0.5, 0.5, 'teleport')


def test_powerup_labels():
    assert powerup_label('speed') == 'Speed Boost'
    assert powerup_label('ghost') == 'Ghost Mode'
    assert powerup_label('freeze') == 'Freeze Enemies'
    assert powerup_label(None) == ''


def test_hud_snapshot(state):
    state.score = 1250
    state.keys = 1
    state.elapsed_ticks = 61 * 60
    state.active_powerup = 'freeze'
    state.powerup_timer = 3.5
    state.visited.update({(1, 0), (2, 0)})

    hud = hud_snapshot(state)

    assert hud['level'] == 1
    assert hud['score_text'] == '1,250'
    assert hud['keys'] == 1 and hud['keys_required'] == 1
    assert hud['exit_unlocked']
    assert hud['elapsed_text'] == '61s'
    assert hud['powerup_label'] == 'Freeze Enemies'
    assert hud['powerup_remaining'] == 3.5
    assert hud['position_text'] == '(0, 0)'
    assert hud['progress'] == pytest.approx(3 / 225 * 100)


def test_progress_starts_at_one_cell(state):
    assert state.progress == pytest.approx(100 / 225)
