from jumpknight.camera import BASE_FLOOR_Y, WORLD_TOP_Y, Camera, update_camera
from jumpknight.geometry import Vector2

W, H = 640, 480


def test_defaults():
    camera = Camera()
    assert camera.target == Vector2()
    assert camera.offset == Vector2()
    assert camera.zoom == 1.0


def test_idle_recentres_on_player_with_large_dt():
    camera = Camera(target=Vector2(0, 100))
    update_camera(camera, 1.0, Vector2(500, 300), False, W, H)
    assert camera.target.x == 500
    assert camera.target.y == 100


def test_idle_small_dt_moves_partway():
    camera = Camera(target=Vector2(0, 100))
    update_camera(camera, 1 / 60, Vector2(500, 100), False, W, H)
    assert 0 < camera.target.x < 500


def test_idle_is_slower_than_walking():
    idle = Camera(target=Vector2(0, 100))
    walking = Camera(target=Vector2(0, 100))
    player = Vector2(1000, 100)
    update_camera(idle, 1 / 60, player, False, W, H)
    update_camera(walking, 1 / 60, player, True, W, H)
    assert idle.target.x > 0
    assert walking.target.x > idle.target.x


def test_walking_inside_deadzone_keeps_target():
    camera = Camera(target=Vector2(300, 200))
    update_camera(camera, 1 / 60, Vector2(305, 205), True, W, H)
    assert camera.target == Vector2(300, 200)


def test_walking_outside_deadzone_follows_without_reaching_player():
    camera = Camera(target=Vector2(300, 200))
    update_camera(camera, 1.0, Vector2(800, 200), True, W, H)
    assert 300 < camera.target.x < 800
    assert camera.target.y == 200


def test_walking_below_deadzone_moves_down():
    camera = Camera(target=Vector2(300, 200))
    update_camera(camera, 1.0, Vector2(300, 600), True, W, H)
    assert 200 < camera.target.y < 600


def test_zero_dt_keeps_target():
    camera = Camera(target=Vector2(10, 20))
    update_camera(camera, 0.0, Vector2(900, 900), True, W, H)
    assert camera.target == Vector2(10, 20)


def test_clamped_to_top():
    camera = Camera(target=Vector2(0, -50), offset=Vector2(320, 240))
    update_camera(camera, 0.0, Vector2(0, -50), False, W, H)
    assert camera.target.y == WORLD_TOP_Y + camera.offset.y


def test_clamped_to_bottom():
    camera = Camera(target=Vector2(0, 5000), offset=Vector2(320, 240))
    update_camera(camera, 0.0, Vector2(0, 5000), False, W, H)
    assert camera.target.y == BASE_FLOOR_Y + camera.offset.y


def test_target_stays_within_limits():
    camera = Camera(target=Vector2(0, 0), offset=Vector2(320, 240))
    for y in (-1000, 0, 400, 2000, 10000):
        update_camera(camera, 1.0, Vector2(0, y), True, W, H)
        assert WORLD_TOP_Y + camera.offset.y <= camera.target.y
        assert camera.target.y <= BASE_FLOOR_Y + camera.offset.y