# src/game/game.py
import sys, argparse, logging
import pygame
from pygame import K_SPACE, K_ESCAPE
from .config import WIDTH, HEIGHT, FPS, HIGHSCORE_FILE
from .simulation import Simulation
from .store import JsonFileStore
from .render import draw_frame, make_fonts

logger = logging.getLogger(__name__)


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Pipe layout seed. Omit for a random layout each launch.")
    p.add_argument("--highscore-file", type=str, default=HIGHSCORE_FILE,
                   help="JSON file holding the high score.")
    p.add_argument("--debug", action="store_true", help="Log phase changes")
    return p.parse_args()


def is_activate(event) -> bool:
    """SPACE, left click or a touch: one activation per physical press."""
    if event.type == pygame.KEYDOWN:
        return event.key == K_SPACE
    if event.type == pygame.MOUSEBUTTONDOWN:
        # Touch also produces synthetic mouse events; FINGERDOWN handles those.
        return event.button == 1 and not getattr(event, "touch", False)
    return event.type == pygame.FINGERDOWN


def run():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    store = JsonFileStore(args.highscore_file)
    sim = Simulation(args.seed, store=store)
    logger.info("seed=%s high_score=%d", sim.seed, sim.high_score)

    pygame.init()
    pygame.display.set_caption("Flappy Bird")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    pygame.key.set_repeat()  # no key repeat: a held SPACE is a single flap
    fonts = make_fonts()

    def quit_game():
        store.flush(timeout=1.0)
        pygame.quit(); sys.exit()

    while True:
        clock.tick(FPS)

        # Inputs are applied before the tick, never during it
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_game()
            if event.type == pygame.KEYDOWN and event.key == K_ESCAPE:
                quit_game()
            if is_activate(event):
                sim.handle_input()

        sim.tick()

        draw_frame(screen, sim, fonts)
        pygame.display.flip()


if __name__ == "__main__":
    run()
