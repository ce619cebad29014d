import math
import random
import pygame
from config import SPARK_LIFE, SPARK_N, CYAN, MAGENTA, YELLOW, WHITE

class Particles:
    gravity = 0.0
    drag = 1.0

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.parts = []

    def clear(self):
        self.parts = []

    def update(self, dt):
        alive = []
        damp = self.drag ** (dt * 60.0)
        for p in self.parts:
            p["life"] -= dt
            if p["life"] <= 0:
                continue
            p["v"][1] += self.gravity * dt
            p["v"][0] *= damp
            p["v"][1] *= damp
            p["p"][0] += p["v"][0] * dt
            p["p"][1] += p["v"][1] * dt
            alive.append(p)
        self.parts = alive

class Sparks(Particles):
    drag = 0.88

    def burst(self, center, color, direction=0, n=SPARK_N):
        # direction biases the spray: +1 to the right, -1 to the left, 0 all round
        cx, cy = center
        for _ in range(n):
            a = self.rng.random() * math.tau
            s = self.rng.uniform(160, 620)
            vx = math.cos(a) * s
            if direction:
                vx = abs(vx) * direction
            self.parts.append({
                "p": [cx, cy],
                "v": [vx, math.sin(a) * s],
                "life": self.rng.uniform(*SPARK_LIFE),
                "size": self.rng.randint(2, 3),
                "col": color,
            })

    def draw(self, surf):
        for p in self.parts:
            pygame.draw.circle(surf, p["col"], (int(p["p"][0]), int(p["p"][1])), p["size"])

class Confetti(Particles):
    gravity = 900.0

    def burst(self, center, n=240):
        cx, cy = center
        for _ in range(n):
            a = self.rng.random() * math.tau
            s = self.rng.uniform(200, 900)
            self.parts.append({
                "p": [cx + self.rng.uniform(-10, 10), cy + self.rng.uniform(-10, 10)],
                "v": [math.cos(a) * s, math.sin(a) * s],
                "life": self.rng.uniform(1.4, 2.6),
                "size": self.rng.randint(2, 5),
                "col": self.rng.choice([CYAN, MAGENTA, YELLOW, WHITE]),
                "ang": self.rng.uniform(0, math.tau),
            })

    def draw(self, surf):
        for p in self.parts:
            x, y = p["p"]
            s = p["size"]
            a = p["ang"] + p["life"] * 6.0
            dx = math.cos(a) * s
            dy = math.sin(a) * s
            pygame.draw.line(surf, p["col"], (x - dx, y - dy), (x + dx, y + dy), s)
