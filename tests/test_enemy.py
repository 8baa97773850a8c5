import unittest

from towerfrog.enemy import Enemy, enemy_health_for_wave, enemy_speed_for_wave, update_enemies
from towerfrog.events import GameEvent
from towerfrog.state import GameState


class TestEnemyStats(unittest.TestCase):
    def test_first_wave_stats(self):
        self.assertEqual(enemy_speed_for_wave(1), 62.0)
        self.assertEqual(enemy_health_for_wave(1), 50.0)

    def test_bonus_starts_after_wave_five(self):
        self.assertEqual(enemy_speed_for_wave(5), 70.0)
        self.assertEqual(enemy_health_for_wave(5), 90.0)
        self.assertEqual(enemy_speed_for_wave(6), 81.0)
        self.assertEqual(enemy_health_for_wave(6), 148.0)

    def test_for_wave_starts_at_path_start(self):
        state = GameState()
        enemy = Enemy.for_wave(state.path, 1)
        self.assertEqual(enemy.position, state.path.start)
        self.assertEqual(enemy.path_index, 0)
        self.assertEqual(enemy.health, enemy.max_health)
        self.assertTrue(enemy.alive)


class TestEnemyDamage(unittest.TestCase):
    def test_take_damage(self):
        enemy = Enemy((0.0, 0.0), 62.0, 50.0)
        self.assertFalse(enemy.take_damage(30.0))
        self.assertEqual(enemy.health, 20.0)
        self.assertAlmostEqual(enemy.health_ratio(), 0.4)
        self.assertTrue(enemy.take_damage(30.0))
        self.assertFalse(enemy.alive)
        self.assertEqual(enemy.health_ratio(), 0.0)

    def test_dead_enemy_ignores_damage(self):
        enemy = Enemy((0.0, 0.0), 62.0, 50.0)
        enemy.alive = False
        self.assertFalse(enemy.take_damage(30.0))
        self.assertEqual(enemy.health, 50.0)


class TestEnemyMotion(unittest.TestCase):
    def setUp(self):
        self.state = GameState()
        self.enemy = Enemy.for_wave(self.state.path, 1)
        self.state.enemies.append(self.enemy)

    def test_moves_towards_next_waypoint(self):
        update_enemies(self.state, 0.5)
        x, y = self.enemy.position
        self.assertAlmostEqual(x, 31.0)
        self.assertAlmostEqual(y, self.state.path.start[1])
        self.assertEqual(self.enemy.path_index, 0)

    def test_snaps_to_waypoint_without_overshoot(self):
        update_enemies(self.state, 100.0)
        self.assertEqual(self.enemy.position, self.state.path[1])
        self.assertEqual(self.enemy.path_index, 1)
        update_enemies(self.state, 100.0)
        self.assertEqual(self.enemy.position, self.state.path[2])
        self.assertEqual(self.enemy.path_index, 2)

    def test_enemy_reaching_the_end_costs_one_life(self):
        dt = 1.0 / 60
        last_index = 0
        for _ in range(10000):
            if not self.enemy.alive:
                break
            update_enemies(self.state, dt)
            self.assertGreaterEqual(self.enemy.path_index, last_index)
            last_index = self.enemy.path_index

        self.assertFalse(self.enemy.alive)
        self.assertEqual(self.enemy.position, self.state.path[self.state.path.last_index])
        self.assertEqual(self.state.lives, 9)
        self.assertEqual(len(self.state.enemies), 1)
        self.assertFalse(self.state.game_over)
        self.assertEqual(self.state.money, 100)

        update_enemies(self.state, dt)
        self.assertEqual(self.state.lives, 9)

    def test_dead_enemies_do_not_move(self):
        self.enemy.alive = False
        update_enemies(self.state, 1.0)
        self.assertEqual(self.enemy.position, self.state.path.start)

    def test_last_life_sets_game_over(self):
        self.state.lives = 1
        self.enemy.path_index = self.state.path.last_index
        update_enemies(self.state, 0.1)
        self.assertEqual(self.state.lives, 0)
        self.assertTrue(self.state.game_over)
        self.assertIn(GameEvent.GAME_OVER, self.state.events)

    def test_lives_never_go_negative(self):
        self.state.lives = 1
        second = Enemy.for_wave(self.state.path, 1)
        for enemy in (self.enemy, second):
            enemy.path_index = self.state.path.last_index
        self.state.enemies.append(second)

        update_enemies(self.state, 0.1)

        self.assertEqual(self.state.lives, 0)
        self.assertFalse(self.enemy.alive)
        self.assertTrue(second.alive)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
