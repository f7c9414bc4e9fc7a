import re
import sys
from enum import Enum

# u32 の最大値（Rust の u32 と同じ範囲だけ受け付ける）
U32_MAX = 4294967295
U32_DIGITS = len(str(U32_MAX))

# 数字だけ（先頭の + はOK）。"-1" や "3.5" や "1_000" はダメ
NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


class GuessingGameError(Exception):
    """Base exception for the guessing game."""


class ReadError(GuessingGameError):
    """Raised when standard input can no longer be read (fatal)."""


class Outcome(Enum):
    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"


FEEDBACK = {
    Outcome.LESS: "Too small!",
    Outcome.GREATER: "Too big!",
    Outcome.EQUAL: "You win!",
}


def read_line():
    """
    標準入力から1行読む。
    入力が閉じていたら（EOF）、もう続けられないので ReadError を投げる
    """
    # stdin そのものが無い（閉じられている）時も同じく致命的
    if sys.stdin is None:
        raise ReadError("Failed to read line: standard input is closed")

    try:
        return input()
    except EOFError as e:
        raise ReadError("Failed to read line: end of input") from e
    except UnicodeDecodeError as e:
        # UTF-8 じゃないバイトが来た
        raise ReadError(f"Failed to read line: {e}") from e
    except OSError as e:
        raise ReadError(f"Failed to read line: {e}") from e


def parse_guess(raw):
    """
    入力された文字を数字に変換する。
    変換できない時はエラーにせず None を返す（もう一回聞けばいいだけ）
    """
    # 前後の空白と改行を取る
    text = raw.strip()

    if not NUMBER_PATTERN.fullmatch(text):
        return None

    # 先頭の + と 0 を取ってから桁数を見る（"00042" は 42）
    digits = text.lstrip("+").lstrip("0") or "0"

    # u32 は最大10桁。それより長いのは int() に渡す前に「大きすぎ」
    if len(digits) > U32_DIGITS:
        return None

    number = int(digits)

    # 大きすぎる数字も「読めなかった」扱い
    if number > U32_MAX:
        return None

    return number


def compare(guess, secret):
    if guess < secret:
        return Outcome.LESS
    if guess > secret:
        return Outcome.GREATER
    return Outcome.EQUAL
