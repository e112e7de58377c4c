from __future__ import annotations

import logging

from array_ops_demo.talk import LightningTalk
from array_ops_demo.transcript import Transcript


def main() -> None:
    # только сообщения, без префиксов логгера
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    transcript = Transcript()
    ok = LightningTalk(transcript).run()

    print("\n=== RESULT ===")
    print("all cases agree:", ok)
    print("lines:", len(transcript.lines))


if __name__ == "__main__":
    main()
