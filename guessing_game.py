import argparse
import random
import sys

import tui
from guess import FEEDBACK, Outcome, ReadError, compare, parse_guess, read_line

# 秘密の数字の範囲（1〜100、両方含む）
LOW = 1
HIGH = 100


def run(rng=None, reveal=False):
    """
    数当てゲーム本体。当たるまでずっと繰り返す。
    入力が読めなくなったら ReadError がそのまま外に飛んでいく
    """
    if rng is None:
        rng = random

    # 1. 秘密の数字を1回だけ決める（ゲーム中はずっと同じ）
    secret = rng.randint(LOW, HIGH)

    print("Guess the number!")

    # 開発中のデバッグ用（--reveal の時だけ答えを見せる）
    if reveal:
        print(f"The secret number is: {secret}")

    while True:  # ★当たるまで繰り返す
        print("Please enter your guess:")

        # 2. 1行読む（読めなければ ReadError で終了）
        raw = read_line()

        # 3. 数字に変換。ダメならもう一回聞くだけ
        guess = parse_guess(raw)
        if guess is None:
            continue

        print(f"You guessed: {guess}")

        # 4. 比べてヒントを出す
        outcome = compare(guess, secret)
        print(FEEDBACK[outcome])

        if outcome is Outcome.EQUAL:
            break  # ★正解！ループから脱出


def main(argv=None):
    parser = argparse.ArgumentParser(description="Guess the number between 1 and 100.")
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="print the secret number at the start (for debugging)",
    )
    args = parser.parse_args(argv)

    try:
        run(reveal=args.reveal)
    except ReadError as e:
        tui.tui_print_error(str(e))
        return 1
    except KeyboardInterrupt:
        tui.tui_print_warning("Interrupted. Bye!")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
