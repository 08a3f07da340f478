from flip_birds.collision import bird_hitbox, check_collision, collect_passes, hits_bounds
from flip_birds.config import BIRD_SIZE, BIRD_X, HIT_INSET, PIPE_WIDTH, PLAYABLE_HEIGHT
from flip_birds.entities import Bird, Obstacle


def test_hitbox_is_inset() -> None:
    box = bird_hitbox(Bird(200, 100))
    assert (box.left, box.top) == (200 + HIT_INSET, 100 + HIT_INSET)
    assert (box.right, box.bottom) == (200 + BIRD_SIZE - HIT_INSET, 100 + BIRD_SIZE - HIT_INSET)


def test_ground_and_ceiling() -> None:
    # Hitbox bottom touching the ground band counts
    assert hits_bounds(bird_hitbox(Bird(BIRD_X, PLAYABLE_HEIGHT - BIRD_SIZE + HIT_INSET)))
    assert not hits_bounds(bird_hitbox(Bird(BIRD_X, PLAYABLE_HEIGHT - BIRD_SIZE + HIT_INSET - 1)))
    assert hits_bounds(bird_hitbox(Bird(BIRD_X, -HIT_INSET - 1)))
    assert not hits_bounds(bird_hitbox(Bird(BIRD_X, -HIT_INSET)))


def test_gap_boundary_tolerance() -> None:
    obs = Obstacle(BIRD_X, 150, 150)
    # Nominal square pokes into the top pipe by less than the inset
    assert not check_collision(Bird(BIRD_X, 150 - HIT_INSET), [obs])
    assert not check_collision(Bird(BIRD_X, 150 - HIT_INSET + 1), [obs])
    assert check_collision(Bird(BIRD_X, 150 - HIT_INSET - 1), [obs])
    # Same at the bottom pipe
    assert not check_collision(Bird(BIRD_X, 300 - BIRD_SIZE + HIT_INSET), [obs])
    assert check_collision(Bird(BIRD_X, 300 - BIRD_SIZE + HIT_INSET + 1), [obs])


def test_no_collision_without_horizontal_overlap() -> None:
    bird = Bird(BIRD_X, 10)
    ahead = Obstacle(BIRD_X + BIRD_SIZE - HIT_INSET, 300, 100)  # starts where the hitbox ends
    behind = Obstacle(BIRD_X + HIT_INSET - PIPE_WIDTH, 300, 100)
    assert not check_collision(bird, [ahead, behind])


def test_pass_is_one_shot() -> None:
    bird = Bird(BIRD_X, 100)
    obs = Obstacle(BIRD_X - PIPE_WIDTH - 1, 100, 200)
    assert list(collect_passes(bird, [obs])) == [obs]
    assert obs.passed
    assert list(collect_passes(bird, [obs])) == []
    assert obs.passed


def test_pass_requires_right_edge_strictly_behind_bird() -> None:
    bird = Bird(BIRD_X, 100)
    obs = Obstacle(BIRD_X - PIPE_WIDTH, 100, 200)
    assert list(collect_passes(bird, [obs])) == []
