"""
どこで: リポジトリ直下 `main.py`。
何を: A / C / W を用いた簡単なスケッチを定義し、run でプレビュー表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import sys

sys.path.append("src")

from frameweave import A, C, W, run

CANVAS_WIDTH = 640
CANVAS_HEIGHT = 480

# 2 秒かけて左から右へ、同じ時間で戻る往復を繰り返す。
sweep = A.ping_pong(A.gradual(40.0, 560.0, 2.0, A.ease.sine_in_out), 1000)
spin = A.repeat(A.gradual(0.0, 360.0, 4.0), 1000)
pulse = A.sequence(A.gradual(1.0, 1.5, 0.5, A.ease.back_out), A.gradual(1.5, 1.0, 0.5)).repeat(1000)

badge = W.rect(80, 30) | W.origin((40, 15)) | W.fill((0.9, 0.4, 0.1)) | W.outline_thickness(2)


def draw(t: float):
    background = C.grid((CANVAS_WIDTH, CANVAS_HEIGHT), 40) | C.outline_color((0.2, 0.2, 0.2))

    dots = C.repeat(C.distribute((60, 0)), C.circle(8), 9) | C.translate((60, 400)) | C.fill_color(C.CYAN)

    box = (
        C.rect((60, 60))
        | C.translate((sweep(t), 120))
        | C.rotate(spin(t), pivot=(30, 30))
        | C.fill_color(C.MAGENTA)
        | C.outline_thickness(0)
    )

    label = C.text(f"t = {t:5.2f}") | C.translate((20, 20)) | C.fill_color(C.WHITE) | C.font_size(18)

    return [
        background,
        dots,
        box,
        label,
        badge | W.position((320, 260)) | W.scale(pulse(t)) | W.rotate(-spin(t)),
    ]


if __name__ == "__main__":
    run(
        draw,
        canvas_size=(CANVAS_WIDTH, CANVAS_HEIGHT),
        background_color=(0.05, 0.05, 0.08),
        caption="frameweave demo",
    )
