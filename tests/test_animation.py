import pytest

from jumpknight.animation import AnimPlayer, AnimState, Animation


def _player(loop=True):
    idle = Animation.from_strip(64, 16, 4, 0.15, loop)
    walk = Animation.from_strip(64, 16, 4, 0.1, loop)
    return AnimPlayer({AnimState.IDLE: idle, AnimState.WALK: walk})


def test_from_strip_frames():
    anim = Animation.from_strip(64, 16, 4, 0.15)
    assert len(anim.frames) == 4
    assert anim.frames[0].x == 0
    assert anim.frames[1].x == 16
    assert all(f.width == anim.frames[0].width for f in anim.frames)
    assert anim.frames[0].width * 4 == 64
    assert all(f.height == 16 and f.y == 0 for f in anim.frames)
    assert anim.loop is True


def test_frames_are_contiguous():
    anim = Animation.from_strip(90, 10, 3, 0.1)
    for left, right in zip(anim.frames, anim.frames[1:]):
        assert left.x + left.width == right.x


def test_from_strip_rejects_zero_frames():
    with pytest.raises(ValueError):
        Animation.from_strip(64, 16, 0, 0.1)


def test_animation_rejects_empty_frames():
    with pytest.raises(ValueError):
        Animation(frames=(), frame_time=0.1)


def test_player_requires_idle():
    walk = Animation.from_strip(64, 16, 4, 0.1)
    with pytest.raises(ValueError):
        AnimPlayer({AnimState.WALK: walk})


def test_missing_states_use_idle():
    player = _player()
    assert player.anims[AnimState.JUMP] is player.anims[AnimState.IDLE]
    assert player.anims[AnimState.FALL] is player.anims[AnimState.IDLE]
    assert player.anims[AnimState.WALK] is not player.anims[AnimState.IDLE]


@pytest.mark.parametrize(
    "velocity_y, walking, expected",
    [
        (-5.0, False, AnimState.JUMP),
        (-5.0, True, AnimState.JUMP),
        (5.0, True, AnimState.FALL),
        (0.0, True, AnimState.WALK),
        (0.0, False, AnimState.IDLE),
    ],
)
def test_state_selection(velocity_y, walking, expected):
    player = _player()
    player.update(0.01, velocity_y, walking)
    assert player.state is expected


def test_state_change_resets_frame_and_timer():
    player = _player()
    player.frame = 2
    player.timer = 0.05
    player.update(0.01, -1.0, False)
    assert player.state is AnimState.JUMP
    assert player.frame == 0
    assert player.timer == pytest.approx(0.01)


def test_looping_animation_wraps():
    player = _player()
    frame_time = player.animation.frame_time
    count = len(player.animation.frames)
    seen = []
    for _ in range(count):
        player.update(frame_time, 0.0, False)
        seen.append(player.frame)
    assert seen == list(range(1, count)) + [0]


def test_non_looping_animation_holds_last_frame():
    player = _player(loop=False)
    frame_time = player.animation.frame_time
    for _ in range(10):
        player.update(frame_time, 0.0, False)
    assert player.frame == len(player.animation.frames) - 1


def test_timer_below_frame_time_keeps_frame():
    player = _player()
    player.update(player.animation.frame_time / 2, 0.0, False)
    assert player.frame == 0
    assert player.current_frame() == player.animation.frames[0]


def test_source_rect_flip():
    player = _player()
    plain = player.source_rect()
    flipped = player.source_rect(True)
    assert plain == player.current_frame()
    assert flipped.width == -plain.width
    assert (flipped.x, flipped.y, flipped.height) == (plain.x, plain.y, plain.height)