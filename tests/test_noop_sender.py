from __future__ import annotations

import unittest

from _support import make_span

from tracekit.adapters.senders.noop import NoopSender
from tracekit.ports.sender import SenderError, SenderPort


class TestNoopSender(unittest.TestCase):
    def test_discards_spans(self) -> None:
        sender = NoopSender()
        self.assertIsInstance(sender, SenderPort)
        self.assertEqual(0, sender.append(make_span("a")))
        self.assertEqual(0, sender.flush())
        self.assertEqual(0, sender.close())

    def test_encoding_errors_surface(self) -> None:
        with self.assertRaises(SenderError):
            NoopSender().append(object())


if __name__ == "__main__":
    unittest.main()
