#!/usr/bin/env python3
"""
client.py

pygame window, input wiring and the frame loop that drives FloppyGame.
"""

from typing import Optional

import pygame

from .audio import BeepAudio
from .config import GameConfig, load_config
from .data_models import EventKind, GameEvent
from .game import FloppyGame
from .logger import get_logger, setup_logging
from .render import Renderer
from .score_db import ScoreDatabase

log = get_logger("client")

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)


class FloppyClient:
    def __init__(self, config: GameConfig):
        pygame.init()
        self.config = config
        self.screen = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
        pygame.display.set_caption("Floppy Bird")

        self.db = ScoreDatabase(config.db_path)
        self.game = FloppyGame(config.width, config.height, store=self.db)
        self.audio = BeepAudio(muted=config.muted)
        self.renderer = Renderer(self.screen)

        self.ended_ms: Optional[int] = None
        self.game.subscribe(self.audio)
        self.game.subscribe(self._on_event)

        self.clock = pygame.time.Clock()

    def _on_event(self, event: GameEvent):
        if event.kind is EventKind.ENDED:
            self.ended_ms = pygame.time.get_ticks()

    def run(self):
        """The main client execution loop."""
        log.info("Best record so far: %d", self.game.best_record())
        running = True
        while running:
            self.clock.tick(self.config.fps)
            now = pygame.time.get_ticks()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event.key, now)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self.game.flap(now)
                elif event.type == pygame.VIDEORESIZE:
                    self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                    self.renderer.screen = self.screen
                    self.game.resize(event.w, event.h)

            snap = self.game.tick(now)
            self.renderer.draw(snap, result=self.game.last_result, ended_ms=self.ended_ms,
                               now_ms=now, muted=self.audio.muted)

        self.db.close()
        pygame.quit()

    def _handle_key(self, key: int, now: int) -> bool:
        if key == pygame.K_ESCAPE:
            return False
        if key in FLAP_KEYS:
            self.game.flap(now)
        elif key == pygame.K_RETURN:
            self.game.start(now)
        elif key == pygame.K_p:
            self.game.toggle_pause(now)
        elif key == pygame.K_r:
            self.game.retry(now)
            self.ended_ms = None
        elif key == pygame.K_m:
            self.audio.toggle_mute()
        return True


def main():
    config = load_config()
    setup_logging(config.log_level, config.log_file)
    FloppyClient(config).run()


if __name__ == "__main__":
    main()
