import math
import pygame
from config import BG, WHITE, GRAY, CYAN, MAGENTA, YELLOW, COUNTDOWN_FROM, COUNTDOWN_STEP_SEC

BUTTON_W, BUTTON_H, BUTTON_GAP = 320, 46, 14

def countdown_label(elapsed):
    """Text shown `elapsed` seconds into the resume countdown, or None once it is over."""
    if elapsed < 0:
        elapsed = 0.0
    step = int(elapsed // COUNTDOWN_STEP_SEC)
    if step < COUNTDOWN_FROM:
        return str(COUNTDOWN_FROM - step)
    if step == COUNTDOWN_FROM:
        return "GO!"
    return None

def countdown_duration():
    return (COUNTDOWN_FROM + 1) * COUNTDOWN_STEP_SEC

def pulse_scale(t):
    return 1.0 + 0.18 * math.sin(min(1.0, max(0.0, t)) * math.pi)

def menu_layout(size, count, top=None):
    w, h = size
    total = count * BUTTON_H + (count - 1) * BUTTON_GAP
    y = top if top is not None else (h - total) // 2 + 40
    rects = []
    for i in range(count):
        rects.append(pygame.Rect((w - BUTTON_W) // 2, y + i * (BUTTON_H + BUTTON_GAP), BUTTON_W, BUTTON_H))
    return rects

def hit_button(rects, pos):
    for i, r in enumerate(rects):
        if r.collidepoint(pos):
            return i
    return None

def draw_table(surf):
    surf.fill(BG)
    w, h = surf.get_size()
    x = w // 2 - 2
    for y in range(0, h, 20):
        pygame.draw.rect(surf, WHITE, (x, y, 4, 10))

def draw_match(surf, match, score_font):
    left, right, ball = match.left, match.right, match.ball
    pygame.draw.rect(surf, CYAN, (int(left.x), int(left.y), int(left.w), int(left.h)))
    pygame.draw.rect(surf, MAGENTA, (int(right.x), int(right.y), int(right.w), int(right.h)))
    pygame.draw.circle(surf, WHITE, (int(ball.x), int(ball.y)), max(1, int(ball.r)))

    w, _ = surf.get_size()
    for score, cx, col in ((left.score, w // 4, CYAN), (right.score, 3 * w // 4, MAGENTA)):
        t = score_font.render(str(score), True, col)
        surf.blit(t, t.get_rect(center=(cx, 50)))

def draw_button(surf, font, rect, text, active=False):
    bg = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    bg.fill((255, 255, 255, 26 if not active else 70))
    surf.blit(bg, rect.topleft)
    pygame.draw.rect(surf, CYAN if active else GRAY, rect, 2, border_radius=12)
    t = font.render(text, True, WHITE if active else (210, 210, 210))
    surf.blit(t, t.get_rect(center=rect.center))

def draw_menu(surf, title_font, font, title, items, selected):
    w, _ = surf.get_size()
    rects = menu_layout(surf.get_size(), len(items))
    t = title_font.render(title, True, YELLOW)
    surf.blit(t, t.get_rect(center=(w // 2, rects[0].y - 70)))
    for i, (rect, label) in enumerate(zip(rects, items)):
        draw_button(surf, font, rect, label, active=(i == selected))
    return rects

def draw_overlay(surf, big, msg, color, alpha=150):
    w, h = surf.get_size()
    panel = pygame.Surface((w, h), pygame.SRCALPHA)
    panel.fill((0, 0, 0, alpha))
    surf.blit(panel, (0, 0))
    if msg:
        t = big.render(msg, True, color)
        surf.blit(t, t.get_rect(center=(w // 2, h // 2 - 64)))

def draw_countdown(surf, big, label, elapsed):
    if label is None:
        return
    w, h = surf.get_size()
    frac = (elapsed % COUNTDOWN_STEP_SEC) / COUNTDOWN_STEP_SEC
    scale = pulse_scale(frac)
    t = big.render(label, True, YELLOW)
    tw, th = t.get_size()
    t = pygame.transform.smoothscale(t, (max(1, int(tw * scale)), max(1, int(th * scale))))
    surf.blit(t, t.get_rect(center=(w // 2, h // 2)))

def draw_text_block(surf, font, lines, top, color=WHITE, spacing=30):
    w, _ = surf.get_size()
    for i, line in enumerate(lines):
        t = font.render(line, True, color)
        surf.blit(t, t.get_rect(center=(w // 2, top + i * spacing)))

def high_score_lines(scores):
    if not scores:
        return ["No scores yet!"]
    return [f"{i + 1}. Score: {s['score']} - Date: {s['date']}" for i, s in enumerate(scores)]

def draw_hint(surf, small, text):
    _, h = surf.get_size()
    t = small.render(text, True, GRAY)
    surf.blit(t, (14, h - 26))
