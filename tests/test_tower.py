import unittest

from towerfrog.config import CELL_HEIGHT, CELL_WIDTH, TOWER_FIRE_INTERVAL, TOWER_RANGE
from towerfrog.enemy import Enemy
from towerfrog.events import GameEvent
from towerfrog.path import cell_center
from towerfrog.state import GameState
from towerfrog.tower import Tower, progress_score, update_towers


def make_enemy(position, path_index=0):
    enemy = Enemy(position, 62.0, 50.0)
    enemy.path_index = path_index
    return enemy


class TestProgressScore(unittest.TestCase):
    def setUp(self):
        self.path = GameState().path

    def test_score_on_first_segment(self):
        enemy = make_enemy((220.0, 162.0))
        self.assertAlmostEqual(progress_score(enemy, self.path), 1.0 - 200.0 / (CELL_WIDTH + CELL_HEIGHT))

    def test_later_segment_scores_higher(self):
        early = make_enemy((410.0, 162.0), 0)
        late = make_enemy((420.0, 440.0), 1)
        self.assertGreater(progress_score(late, self.path), progress_score(early, self.path))

    def test_score_at_path_end(self):
        enemy = make_enemy(self.path[self.path.last_index], self.path.last_index)
        self.assertAlmostEqual(progress_score(enemy, self.path), self.path.last_index + 1.0)


class TestTowerTargeting(unittest.TestCase):
    def setUp(self):
        self.path = GameState().path
        self.tower = Tower(cell_center(5, 5))

    def test_defaults(self):
        self.assertEqual(self.tower.range, TOWER_RANGE)
        self.assertEqual(self.tower.fire_interval, TOWER_FIRE_INTERVAL)
        self.assertEqual(self.tower.cooldown, 0.0)

    def test_prefers_enemy_closest_to_next_waypoint(self):
        behind = make_enemy((200.0, 162.0))
        ahead = make_enemy((250.0, 162.0))
        self.assertIs(self.tower.find_target([behind, ahead], self.path), ahead)

    def test_ignores_out_of_range_and_dead_enemies(self):
        far = make_enemy((400.0, 162.0))
        dead = make_enemy((240.0, 162.0))
        dead.alive = False
        near = make_enemy((200.0, 162.0))
        self.assertIs(self.tower.find_target([far, dead, near], self.path), near)

    def test_no_target(self):
        self.assertIsNone(self.tower.find_target([make_enemy((600.0, 450.0))], self.path))

    def test_tie_keeps_first_enemy(self):
        first = make_enemy((220.0, 162.0))
        second = make_enemy((220.0, 162.0))
        self.assertIs(self.tower.find_target([first, second], self.path), first)

    def test_targets_enemy_far_from_next_waypoint(self):
        tower = Tower(cell_center(0, 5))
        enemy = make_enemy((20.0, 162.0))
        self.assertLess(progress_score(enemy, self.path), -1.0)
        self.assertIs(tower.find_target([enemy], self.path), enemy)


class TestTowerFiring(unittest.TestCase):
    def setUp(self):
        self.path = GameState().path
        self.tower = Tower(cell_center(5, 5))
        self.enemy = make_enemy((220.0, 162.0))

    def test_fires_at_captured_position(self):
        projectile = self.tower.update(0.1, [self.enemy], self.path)
        self.assertIsNotNone(projectile)
        self.assertEqual(projectile.position, self.tower.position)
        self.assertEqual(projectile.target, (220.0, 162.0))
        self.assertEqual(self.tower.cooldown, TOWER_FIRE_INTERVAL)

        self.enemy.position = (230.0, 162.0)
        self.assertEqual(projectile.target, (220.0, 162.0))

    def test_waits_for_cooldown(self):
        self.tower.update(0.1, [self.enemy], self.path)
        self.assertIsNone(self.tower.update(0.25, [self.enemy], self.path))
        self.assertIsNotNone(self.tower.update(0.5, [self.enemy], self.path))

    def test_idle_cooldown_is_clamped(self):
        for _ in range(10):
            self.assertIsNone(self.tower.update(1.0, [], self.path))
        self.assertEqual(self.tower.cooldown, 0.0)

        self.assertIsNotNone(self.tower.update(0.25, [self.enemy], self.path))
        self.assertIsNone(self.tower.update(0.25, [self.enemy], self.path))

    def test_update_towers_fills_projectile_store(self):
        state = GameState()
        state.towers.append(self.tower)
        state.towers.append(Tower(cell_center(20, 2)))
        state.enemies.append(self.enemy)

        update_towers(state, 0.1)

        self.assertEqual(len(state.projectiles), 1)
        self.assertEqual(state.events, [GameEvent.SHOT])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
