import unittest

from towerfrog.config import PROJECTILE_DAMAGE
from towerfrog.enemy import Enemy
from towerfrog.events import GameEvent
from towerfrog.projectile import Projectile, update_projectiles
from towerfrog.state import GameState, kill_reward


class TestProjectileFlight(unittest.TestCase):
    def test_moves_towards_target(self):
        projectile = Projectile((0.0, 0.0), (100.0, 0.0))
        projectile.update(0.1)
        self.assertAlmostEqual(projectile.position[0], 32.0)
        self.assertTrue(projectile.active)

    def test_snaps_and_deactivates_on_arrival(self):
        projectile = Projectile((0.0, 0.0), (100.0, 0.0))
        projectile.update(1.0)
        self.assertEqual(projectile.position, (100.0, 0.0))
        self.assertFalse(projectile.active)

    def test_miss_is_removed(self):
        state = GameState()
        state.projectiles.append(Projectile((0.0, 0.0), (100.0, 0.0)))
        update_projectiles(state, 1.0)
        self.assertEqual(state.projectiles, [])


class TestProjectileCollision(unittest.TestCase):
    def setUp(self):
        self.state = GameState()
        self.projectile = Projectile((0.0, 0.0), (100.0, 0.0))
        self.state.projectiles.append(self.projectile)

    def add_enemy(self, position, health=50.0):
        enemy = Enemy(position, 62.0, health)
        self.state.enemies.append(enemy)
        return enemy

    def test_hit_on_the_way_consumes_projectile(self):
        enemy = self.add_enemy((40.0, 0.0))
        update_projectiles(self.state, 0.1)
        self.assertEqual(enemy.health, 50.0 - PROJECTILE_DAMAGE)
        self.assertTrue(enemy.alive)
        self.assertFalse(self.projectile.active)
        self.assertEqual(self.state.projectiles, [])
        self.assertEqual(self.state.money, 100)

    def test_hit_after_snapping_to_target(self):
        enemy = self.add_enemy((105.0, 0.0))
        update_projectiles(self.state, 1.0)
        self.assertEqual(enemy.health, 50.0 - PROJECTILE_DAMAGE)
        self.assertEqual(self.state.projectiles, [])

    def test_no_hit_keeps_flying(self):
        enemy = self.add_enemy((40.0, 50.0))
        update_projectiles(self.state, 0.1)
        self.assertEqual(enemy.health, 50.0)
        self.assertEqual(self.state.projectiles, [self.projectile])

    def test_only_first_enemy_in_store_order_is_hit(self):
        first = self.add_enemy((35.0, 0.0))
        second = self.add_enemy((30.0, 0.0))
        update_projectiles(self.state, 0.1)
        self.assertEqual(first.health, 50.0 - PROJECTILE_DAMAGE)
        self.assertEqual(second.health, 50.0)

    def test_dead_enemies_are_skipped(self):
        ghost = self.add_enemy((32.0, 0.0))
        ghost.alive = False
        update_projectiles(self.state, 0.1)
        self.assertEqual(ghost.health, 50.0)
        self.assertEqual(self.state.projectiles, [self.projectile])

    def test_kill_awards_money(self):
        enemy = self.add_enemy((40.0, 0.0), health=PROJECTILE_DAMAGE)
        update_projectiles(self.state, 0.1)
        self.assertFalse(enemy.alive)
        self.assertEqual(self.state.money, 100 + kill_reward(1))
        self.assertEqual(self.state.events, [GameEvent.ENEMY_KILLED])

    def test_kill_reward_scales_with_wave(self):
        self.assertEqual(kill_reward(1), 12)
        self.assertEqual(kill_reward(10), 30)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
