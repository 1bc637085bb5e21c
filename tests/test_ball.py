"""Tests for Ball class."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest

from ball import PADDLE, WALL, Ball, create_ball
from config import Config
from field import Viewport
from paddle import Paddle, Side


class BallTestCase(unittest.TestCase):
    """Paddles parked at the default 800x600 positions."""

    def setUp(self):
        self.left = Paddle(side=Side.LEFT, x=0, y=300)
        self.right = Paddle(side=Side.RIGHT, x=780, y=300)

    def step(self, ball, elapsed=0.01, height=600):
        return ball.update(elapsed, self.left, self.right, height)


class TestBallMotion(BallTestCase):
    """Test ball integration."""

    def test_create_ball(self):
        """Ball should start at the center with the configured velocity."""
        ball = create_ball(Config(), Viewport(800, 600))
        self.assertEqual(ball.position, (400, 300))
        self.assertEqual(ball.velocity, (300, 300))
        self.assertEqual(ball.radius, 15)

    def test_update_position(self):
        """Ball should move by velocity times elapsed."""
        ball = Ball(x=400, y=300, vx=200, vy=-100)
        event = self.step(ball, 0.5)
        self.assertEqual(ball.position, (500, 250))
        self.assertIsNone(event)

    def test_zero_elapsed_is_noop(self):
        """Zero elapsed time changes nothing."""
        ball = Ball(x=400, y=0, vx=300, vy=-300)
        self.assertIsNone(self.step(ball, 0.0))
        self.assertEqual(ball.position, (400, 0))
        self.assertEqual(ball.velocity, (300, -300))

    def test_negative_elapsed_is_noop(self):
        """Negative elapsed time changes nothing."""
        ball = Ball(x=400, y=300, vx=300, vy=300)
        self.step(ball, -1.0)
        self.assertEqual(ball.position, (400, 300))


class TestWallBounce(BallTestCase):
    """Test vertical wall bounces."""

    def test_top_bounce(self):
        """Crossing the top flips vy."""
        ball = Ball(x=400, y=2, vx=300, vy=-300)
        event = self.step(ball)
        self.assertEqual(event, WALL)
        self.assertEqual(ball.vy, 300)
        self.assertEqual(ball.vx, 300)

    def test_sign_persists_until_next_wall(self):
        """After a bounce vy keeps its new sign while the ball is in the open."""
        ball = Ball(x=400, y=2, vx=0, vy=-300)
        self.step(ball)
        for _ in range(50):
            self.step(ball)
            self.assertEqual(ball.vy, 300)

    def test_bottom_bounce_threshold(self):
        """Bottom bounces once y reaches height - radius."""
        ball = Ball(x=400, y=598, vx=300, vy=300, radius=15)
        self.step(ball, 1 / 60, height=600)
        self.assertEqual(ball.vy, -300)

    def test_bottom_bounce_exact_threshold(self):
        """y exactly at height - radius bounces."""
        ball = Ball(x=400, y=584, vx=0, vy=100)
        self.step(ball, 0.01)  # y = 585
        self.assertEqual(ball.vy, -100)

    def test_no_bounce_just_above_bottom_threshold(self):
        ball = Ball(x=400, y=580, vx=0, vy=100)
        self.step(ball, 0.01)  # y = 581
        self.assertEqual(ball.vy, 100)

    def test_asymmetric_top_bound(self):
        """By default the top only bounces at y <= 0."""
        ball = Ball(x=400, y=12, vx=0, vy=-100)
        self.step(ball, 0.01)  # y = 11, inside the radius
        self.assertEqual(ball.vy, -100)

    def test_symmetric_top_bound(self):
        """With symmetric walls the top bounces at y <= radius."""
        ball = Ball(x=400, y=12, vx=0, vy=-100, symmetric_walls=True)
        self.step(ball, 0.01)
        self.assertEqual(ball.vy, 100)

    def test_bounce_uses_current_height(self):
        """The bottom wall follows the height passed in each frame."""
        ball = Ball(x=400, y=280, vx=0, vy=100)
        self.step(ball, 0.1, height=300)  # y = 290 >= 285
        self.assertEqual(ball.vy, -100)

    def test_long_frame_past_top_recovers(self):
        """After a long frame past the top, short frames carry the ball back in."""
        ball = Ball(x=400, y=2, vx=0, vy=-300)
        self.assertEqual(self.step(ball, 0.05), WALL)  # y = -13
        self.assertEqual(ball.vy, 300)
        last_y = ball.y
        for _ in range(6):
            self.assertIsNone(self.step(ball, 0.01))
            self.assertEqual(ball.vy, 300)
            self.assertGreater(ball.y, last_y)
            last_y = ball.y
        self.assertGreater(ball.y, 0)

    def test_long_frame_past_bottom_recovers(self):
        """Same recovery at the bottom wall."""
        ball = Ball(x=400, y=580, vx=0, vy=300)
        self.assertEqual(self.step(ball, 0.05), WALL)  # y = 595
        self.assertEqual(ball.vy, -300)
        for _ in range(4):
            self.assertIsNone(self.step(ball, 0.01))
            self.assertEqual(ball.vy, -300)
        self.assertLess(ball.y, 585)


class TestPaddleCollision(BallTestCase):
    """Test paddle collisions."""

    def test_right_paddle_reverses_x_only(self):
        """Hitting a paddle negates vx and leaves vy alone."""
        ball = Ball(x=760, y=300, vx=300, vy=120)
        event = self.step(ball)  # x = 763, box right edge 778
        self.assertIsNone(event)
        event = self.step(ball)  # x = 766, box right edge 781
        self.assertEqual(event, PADDLE)
        self.assertEqual(ball.vx, -300)
        self.assertEqual(ball.vy, 120)

    def test_left_paddle_reverses_x(self):
        ball = Ball(x=40, y=300, vx=-300, vy=-50)
        self.step(ball, 0.02)  # x = 34, box left edge 19
        self.assertEqual(ball.vx, 300)
        self.assertEqual(ball.vy, -50)

    def test_miss_above_paddle(self):
        """A ball passing above the paddle box keeps its direction."""
        ball = Ball(x=40, y=200, vx=-300, vy=0)
        self.step(ball, 0.02)  # box 185..215 vs paddle 250..350
        self.assertEqual(ball.vx, -300)

    def test_paddle_wins_over_wall_event(self):
        """A wall bounce and paddle hit in one frame report PADDLE."""
        self.left.y = 50
        ball = Ball(x=30, y=2, vx=-300, vy=-300)
        event = self.step(ball)
        self.assertEqual(event, PADDLE)
        self.assertEqual(ball.velocity, (300, 300))

    def test_shallow_overlap_escapes(self):
        """A ball that barely touches a paddle clears it on the next frame."""
        ball = Ball(x=40, y=300, vx=-300, vy=0)
        self.step(ball, 0.02)  # overlap, vx -> +300
        self.assertEqual(ball.vx, 300)
        self.step(ball, 0.02)  # back to x = 40, clear
        self.assertEqual(ball.vx, 300)
        self.assertEqual(ball.x, 40)

    def test_deep_overlap_oscillation_is_bounded(self):
        """Without separation a deep overlap flips every frame but stays put.

        The ball is never pushed out of the paddle, so when its travel per
        frame is smaller than the overlap it jitters in place. The jitter
        is bounded by one frame of travel.
        """
        ball = Ball(x=10, y=300, vx=-300, vy=0)
        flips = 0
        for _ in range(100):
            before = ball.vx
            self.step(ball, 0.01)
            if ball.vx != before:
                flips += 1
            self.assertGreaterEqual(ball.x, 7 - 1e-9)
            self.assertLessEqual(ball.x, 10 + 1e-9)
        self.assertEqual(flips, 100)


class TestBallReset(BallTestCase):
    """Test Ball reset."""

    def test_reset_centers_and_restores_velocity(self):
        """Reset always gives the same position and default velocity."""
        ball = Ball(x=795, y=12, vx=-300, vy=-300)
        ball.reset(800, 600)
        self.assertEqual(ball.position, (400, 300))
        self.assertEqual(ball.velocity, (300, 300))

        ball.x, ball.y, ball.vx = 3, 590, 300
        ball.reset(800, 600)
        self.assertEqual(ball.position, (400, 300))
        self.assertEqual(ball.velocity, (300, 300))

    def test_reset_serve_left(self):
        """direction=-1 serves toward the left paddle."""
        ball = Ball(x=0, y=0, speed_x=250, speed_y=200)
        ball.reset(1000, 500, direction=-1)
        self.assertEqual(ball.position, (500, 250))
        self.assertEqual(ball.velocity, (-250, 200))

    def test_rect(self):
        """Bounding box is a 2r square around the center."""
        self.assertEqual(Ball(x=100, y=50, radius=10).rect.bounds, (90, 40, 110, 60))


if __name__ == "__main__":
    unittest.main()
