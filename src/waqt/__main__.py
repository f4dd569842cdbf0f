from __future__ import annotations

from .tui.app import WaqtApp


def main() -> None:
    WaqtApp().run()


if __name__ == "__main__":  # pragma: no cover
    main()
