from __future__ import annotations

import pytest

import hello


def test_hello_world(capsys: pytest.CaptureFixture[str]) -> None:
    assert hello.main() == 0
    assert capsys.readouterr().out == "Hello, world!\n"
