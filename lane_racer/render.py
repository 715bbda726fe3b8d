import os

import numpy as np
import pygame
import pygame.gfxdraw

from lane_racer.config import GameConfig
from lane_racer.entities import EntityKind

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class Renderer:
    """Draws match snapshots onto an offscreen pygame surface."""

    # --- Colors ---
    COLOR_BG = (31, 41, 55)
    COLOR_ROAD = (55, 65, 81)
    COLOR_LANE_MARK = (250, 204, 21)
    COLOR_COIN = (250, 204, 21)
    COLOR_COIN_EDGE = (202, 138, 4)
    COLOR_BLOCKER = (220, 38, 38)
    COLOR_BLOCKER_STRIPE = (254, 226, 226)
    COLOR_CAR = (37, 99, 235)
    COLOR_CAR_WINDOW = (147, 197, 253)
    COLOR_TEXT = (255, 255, 255)
    COLOR_BUTTON = (22, 163, 74)
    COLOR_GAMEOVER = (248, 113, 113)

    DASH_LENGTH = 20
    DASH_PERIOD = 40
    BANNER_HEIGHT = 32

    def __init__(self, config: GameConfig):
        self.config = config
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((config.field_width, config.field_height + self.BANNER_HEIGHT))
        self.font_ui = pygame.font.Font(None, 28)
        self.font_large = pygame.font.Font(None, 56)
        self.road_offset = 0.0

    @property
    def size(self):
        return self.screen.get_size()

    def draw(self, snapshot):
        self.screen.fill(self.COLOR_BG)
        if snapshot.running:
            self.road_offset = (self.road_offset + snapshot.speed) % self.DASH_PERIOD
        self._render_game(snapshot)
        self._render_ui(snapshot)
        return self.screen

    def to_array(self, snapshot):
        self.draw(snapshot)
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _field_rect(self, lane, y):
        lane_width = self.config.lane_width
        size = self.config.object_size
        x = lane * lane_width + (lane_width - size) / 2
        return pygame.Rect(int(x), int(y) + self.BANNER_HEIGHT, size, size)

    def _render_game(self, snapshot):
        top = self.BANNER_HEIGHT
        road = pygame.Rect(0, top, self.config.field_width, self.config.field_height)
        pygame.draw.rect(self.screen, self.COLOR_ROAD, road)

        # Dashed lane markings scroll with the road
        for i in range(1, self.config.lane_count):
            x = int(i * self.config.lane_width) - 1
            y = -self.DASH_PERIOD + int(self.road_offset)
            while y < self.config.field_height:
                start = max(0, y)
                end = min(self.config.field_height, y + self.DASH_LENGTH)
                if end > start:
                    pygame.draw.rect(self.screen, self.COLOR_LANE_MARK, (x, top + start, 2, end - start))
                y += self.DASH_PERIOD

        # Entities are clipped to the road so spawns above it stay hidden
        self.screen.set_clip(road)
        for entity in snapshot.entities:
            rect = self._field_rect(entity.lane, entity.y)
            if entity.kind is EntityKind.COIN:
                radius = rect.width // 2
                pygame.gfxdraw.filled_circle(self.screen, rect.centerx, rect.centery, radius, self.COLOR_COIN)
                pygame.gfxdraw.aacircle(self.screen, rect.centerx, rect.centery, radius, self.COLOR_COIN_EDGE)
                pygame.gfxdraw.aacircle(self.screen, rect.centerx, rect.centery, radius - 6, self.COLOR_COIN_EDGE)
            else:
                pygame.draw.rect(self.screen, self.COLOR_BLOCKER, rect, border_radius=4)
                for k in range(3):
                    stripe = pygame.Rect(rect.left + 4, rect.top + 8 + k * 14, rect.width - 8, 5)
                    pygame.draw.rect(self.screen, self.COLOR_BLOCKER_STRIPE, stripe)

        # Player car
        car = self._field_rect(snapshot.lane, self.config.player_y)
        pygame.draw.rect(self.screen, self.COLOR_CAR, car.inflate(-10, 0), border_radius=8)
        window = pygame.Rect(car.left + 12, car.top + 8, car.width - 24, 12)
        pygame.draw.rect(self.screen, self.COLOR_CAR_WINDOW, window, border_radius=3)
        self.screen.set_clip(None)

    def _render_ui(self, snapshot):
        score_surf = self.font_ui.render(f"Score: {snapshot.score}", True, self.COLOR_TEXT)
        self.screen.blit(score_surf, score_surf.get_rect(center=(self.config.field_width // 2, self.BANNER_HEIGHT // 2)))

        if snapshot.running:
            return

        overlay = pygame.Surface((self.config.field_width, self.config.field_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        self.screen.blit(overlay, (0, self.BANNER_HEIGHT))
        cx = self.config.field_width // 2
        cy = self.BANNER_HEIGHT + self.config.field_height // 2

        if snapshot.ended:
            msg = self.font_large.render("GAME OVER", True, self.COLOR_GAMEOVER)
            self.screen.blit(msg, msg.get_rect(center=(cx, cy - 50)))
            final = self.font_ui.render(f"Final Score: {snapshot.score}", True, self.COLOR_TEXT)
            self.screen.blit(final, final.get_rect(center=(cx, cy)))
            label = "Play Again"
        else:
            label = "Start Game"

        text = self.font_ui.render(label, True, self.COLOR_TEXT)
        button = text.get_rect(center=(cx, cy + 50)).inflate(40, 20)
        pygame.draw.rect(self.screen, self.COLOR_BUTTON, button, border_radius=8)
        self.screen.blit(text, text.get_rect(center=button.center))

    def close(self):
        pygame.quit()
