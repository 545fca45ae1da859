# jumprunner/game/game.py
import sys, argparse
import pygame
from pygame import K_SPACE, K_ESCAPE, K_RETURN, K_z
from .config import WIDTH, HEIGHT, FPS, SEED_DEFAULT
from .controller import SessionController, State
from .render import draw, draw_button, button_rect
from .strings import STRINGS, DEFAULT_LANG, text


def parse_args(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Spawn seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--lang", choices=sorted(STRINGS), default=DEFAULT_LANG,
                   help="UI language")
    return p.parse_args(argv)


def resolve_seed(arg_seed):
    # None -> SEED_DEFAULT; -1 -> random
    if arg_seed is None:
        return SEED_DEFAULT
    if arg_seed == -1:
        return None
    return arg_seed


def run(argv=None):
    args = parse_args(argv)
    lang = args.lang

    pygame.init()
    pygame.display.set_caption(text("title", lang))
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("meiryo,notosanscjkjp,segoeui,sans", 20)
    big_font = pygame.font.SysFont("meiryo,notosanscjkjp,segoeui,sans", 32, bold=True)

    controller = SessionController(resolve_seed(args.seed))
    restart_rect = button_rect()

    def press_button():
        if controller.state == State.RUNNING:
            return
        controller.retry()

    while True:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key in (K_SPACE, K_z):
                    controller.jump()
                if event.key == K_RETURN:
                    press_button()
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if controller.state != State.RUNNING and restart_rect.collidepoint(event.pos):
                    press_button()
                else:
                    controller.jump()

        # one fixed step per displayed frame
        controller.tick()

        # --- Render ---
        draw(screen, controller.session, font, big_font, lang)
        label = controller.button_label(lang)
        if label is not None:
            draw_button(screen, restart_rect, label, font)
        screen.blit(font.render(text("controls", lang), True, (140, 150, 170)), (12, HEIGHT - 28))

        pygame.display.flip()


if __name__ == "__main__":
    run()
