import logging
import os
import pygame

from audio import Audio
from config import W, H, FPS, WHITE, GRAY, CYAN, MAGENTA, YELLOW, LOG_LEVEL
from core import GameMode, GameState, GameOver, Hit, HitKind, InputSnapshot
from fx import Sparks, Confetti
from highscores import HighScoreStore, use_user_locale
from match import Match, tick
from ui import (
    countdown_label, countdown_duration, hit_button, menu_layout, draw_table, draw_match,
    draw_button, draw_menu, draw_overlay, draw_countdown, draw_text_block, high_score_lines,
    draw_hint,
)

logger = logging.getLogger(__name__)

MAIN_ITEMS = ["SINGLE PLAYER", "TWO PLAYER", "HIGH SCORES", "OPTIONS", "ABOUT", "QUIT"]
DIFF_ITEMS = ["EASY", "MEDIUM", "HARD", "BACK"]
PAUSE_ITEMS = ["RESUME", "EXIT"]

ABOUT_LINES = [
    "First to 5 points wins.",
    "Player 1: W / S      Player 2: I / K or arrows",
    "Esc pauses the game.",
    "The ball speeds up with every paddle hit.",
    "Beat the CPU to get on the high score list.",
]


def read_input(keys, up_keys, down_keys):
    return InputSnapshot(
        up=any(keys[k] for k in up_keys),
        down=any(keys[k] for k in down_keys),
    )


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    use_user_locale()
    pygame.init()

    base_dir = os.path.dirname(os.path.abspath(__file__))

    screen = pygame.display.set_mode((W, H), pygame.RESIZABLE)
    pygame.display.set_caption("Neon Pong")

    clock = pygame.time.Clock()

    font = pygame.font.SysFont("consolas", 26)
    small = pygame.font.SysFont("consolas", 18)
    big = pygame.font.SysFont("consolas", 72)
    title_font = pygame.font.SysFont("consolas", 64)
    score_font = pygame.font.SysFont("consolas", 40)

    audio = Audio(base_dir)
    store = HighScoreStore()
    match = Match(*screen.get_size())
    sparks = Sparks()
    confetti = Confetti()

    state = "MENU"
    selected = 0
    countdown_t = None
    winner_text = ""
    new_best = False
    high_scores = []

    def go(new_state):
        nonlocal state, selected
        state = new_state
        selected = 0

    def back_to_menu():
        match.exit_to_menu()
        sparks.clear()
        confetti.clear()
        audio.stop_music()
        audio.play_music("menu")
        go("MENU")

    def start_game(mode, difficulty="medium"):
        nonlocal countdown_t, winner_text, new_best
        sparks.clear()
        confetti.clear()
        countdown_t = None
        winner_text = ""
        new_best = False
        match.resize(*screen.get_size())
        match.start(mode, difficulty)
        audio.reset_tempo()
        audio.stop_music()
        audio.play_music("game")
        go("GAME")

    def pause_game():
        if countdown_t is None and match.pause():
            audio.pause_music()
            go("GAME")

    def begin_countdown():
        nonlocal countdown_t
        countdown_t = 0.0

    def finish_game(event: GameOver):
        nonlocal winner_text, new_best
        winner_text = f"{event.winner_name} Wins!"
        w, h = screen.get_size()
        if match.human_won:
            new_best = store.is_high_score(match.left.score)
            store.add(match.left.score)
            confetti.burst((w / 2, h / 2))

    def menu_items():
        if state == "MENU":
            return MAIN_ITEMS
        if state == "DIFFICULTY":
            return DIFF_ITEMS
        if state == "OPTIONS":
            return [
                f"MUSIC: {'ON' if audio.music_enabled else 'OFF'}",
                f"SFX: {'ON' if audio.sfx_enabled else 'OFF'}",
                "BACK",
            ]
        if state in ("HIGHSCORES", "ABOUT"):
            return ["BACK"]
        if state == "GAME" and match.state == GameState.PAUSED and countdown_t is None:
            return PAUSE_ITEMS
        return []

    def activate(index):
        nonlocal running, high_scores
        audio.play("click")
        if state == "MENU":
            item = MAIN_ITEMS[index]
            if item == "SINGLE PLAYER":
                go("DIFFICULTY")
            elif item == "TWO PLAYER":
                start_game(GameMode.TWO_PLAYER)
            elif item == "HIGH SCORES":
                high_scores = store.load()
                go("HIGHSCORES")
            elif item == "OPTIONS":
                go("OPTIONS")
            elif item == "ABOUT":
                go("ABOUT")
            elif item == "QUIT":
                running = False
        elif state == "DIFFICULTY":
            item = DIFF_ITEMS[index]
            if item == "BACK":
                go("MENU")
            else:
                start_game(GameMode.SINGLE_PLAYER, item.lower())
        elif state == "OPTIONS":
            if index == 0:
                audio.toggle_music("menu")
            elif index == 1:
                audio.toggle_sfx()
            else:
                go("MENU")
        elif state in ("HIGHSCORES", "ABOUT"):
            go("MENU")
        elif state == "GAME":
            if PAUSE_ITEMS[index] == "RESUME":
                begin_countdown()
            else:
                back_to_menu()

    def item_rects(count):
        if state in ("HIGHSCORES", "ABOUT"):
            _, h = screen.get_size()
            return menu_layout(screen.get_size(), count, top=h - 110)
        return menu_layout(screen.get_size(), count)

    logger.info("started at %dx%d", *screen.get_size())
    audio.play_music("menu")

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        if dt > 0.05:
            dt = 0.05

        items = menu_items()

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

            elif e.type == pygame.VIDEORESIZE:
                match.resize(e.w, e.h)

            elif e.type == pygame.KEYDOWN:
                if state == "GAME" and match.state == GameState.GAME_OVER:
                    if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        back_to_menu()
                elif state == "GAME" and match.state == GameState.PLAYING:
                    if e.key == pygame.K_ESCAPE:
                        pause_game()
                elif items:
                    if e.key == pygame.K_UP:
                        selected = (selected - 1) % len(items)
                    elif e.key == pygame.K_DOWN:
                        selected = (selected + 1) % len(items)
                    elif e.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                        activate(selected)
                    elif e.key == pygame.K_ESCAPE and state not in ("MENU", "GAME"):
                        go("MENU")
                items = menu_items()

            elif e.type == pygame.MOUSEMOTION and items:
                i = hit_button(item_rects(len(items)), e.pos)
                if i is not None:
                    selected = i

            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and items:
                i = hit_button(item_rects(len(items)), e.pos)
                if i is not None:
                    activate(i)
                items = menu_items()

        if state == "GAME":
            if countdown_t is not None:
                countdown_t += dt
                if countdown_t >= countdown_duration():
                    countdown_t = None
                    match.resume()
                    audio.resume_music()

            keys = pygame.key.get_pressed()
            left_in = read_input(keys, (pygame.K_w,), (pygame.K_s,))
            right_in = read_input(keys, (pygame.K_i, pygame.K_UP), (pygame.K_k, pygame.K_DOWN))
            for ev in tick(match, left_in, right_in):
                audio.handle(ev)
                if isinstance(ev, Hit) and ev.kind == HitKind.PADDLE:
                    b = match.ball
                    sparks.burst((b.x, b.y), CYAN if b.dx > 0 else MAGENTA, 1 if b.dx > 0 else -1)
                elif isinstance(ev, GameOver):
                    finish_game(ev)

            sparks.update(dt)
            confetti.update(dt)

            draw_table(screen)
            draw_match(screen, match, score_font)
            sparks.draw(screen)
            confetti.draw(screen)

            if match.state == GameState.PAUSED:
                if countdown_t is None:
                    draw_overlay(screen, big, "PAUSED", WHITE)
                    rects = item_rects(len(PAUSE_ITEMS))
                    for i, (r, label) in enumerate(zip(rects, PAUSE_ITEMS)):
                        draw_button(screen, font, r, label, active=(i == selected))
                else:
                    draw_countdown(screen, big, countdown_label(countdown_t), countdown_t)
            elif match.state == GameState.GAME_OVER:
                draw_overlay(screen, big, winner_text, YELLOW)
                _, h = screen.get_size()
                lines = ["Press Enter to return to the menu"]
                if new_best:
                    lines.insert(0, "New high score!")
                draw_text_block(screen, font, lines, h // 2 + 20, GRAY)
            else:
                draw_hint(screen, small, "W/S  vs  I/K  |  Esc: pause")

        else:
            draw_table(screen)
            _, h = screen.get_size()
            if state == "MENU":
                draw_menu(screen, title_font, font, "NEON PONG", items, selected)
            elif state == "DIFFICULTY":
                draw_menu(screen, title_font, font, "DIFFICULTY", items, selected)
            elif state == "OPTIONS":
                draw_menu(screen, title_font, font, "OPTIONS", items, selected)
            elif state == "HIGHSCORES":
                draw_overlay(screen, title_font, "HIGH SCORES", YELLOW, alpha=120)
                draw_text_block(screen, font, high_score_lines(high_scores), h // 2 - 10)
                draw_button(screen, font, item_rects(1)[0], "BACK", active=True)
            elif state == "ABOUT":
                draw_overlay(screen, title_font, "ABOUT", YELLOW, alpha=120)
                draw_text_block(screen, font, ABOUT_LINES, h // 2 - 10)
                draw_button(screen, font, item_rects(1)[0], "BACK", active=True)

        pygame.display.flip()

    audio.stop_music()
    pygame.quit()


if __name__ == "__main__":
    main()
