from __future__ import annotations

import io
import logging
import os
import unittest
from unittest.mock import patch

from strext.core.interfaces import TokenCursorProtocol
from strext.errors import InvalidStateError, StrextError
from strext.needle import Cursor, before, before_after, before_or_self, pop_before


# --------------------------------------------------------------------------- #
#  before / before_after                                                      #
# --------------------------------------------------------------------------- #
class BeforeTests(unittest.TestCase):
    def test_found(self) -> None:
        self.assertEqual(before("abcdef", "cd"), "ab")

    def test_not_found(self) -> None:
        self.assertIsNone(before("abcdef", "zz"))

    def test_leftmost_match(self) -> None:
        self.assertEqual(before("a-b-c", "-"), "a")

    def test_match_at_start_is_empty_string(self) -> None:
        self.assertEqual(before("abc", "ab"), "")

    def test_empty_needle(self) -> None:
        self.assertEqual(before("abc", ""), "")

    def test_or_self(self) -> None:
        self.assertEqual(before_or_self("abcdef", "cd"), "ab")
        self.assertEqual(before_or_self("abcdef", "zz"), "abcdef")


class BeforeAfterTests(unittest.TestCase):
    def test_found(self) -> None:
        self.assertEqual(before_after("abcdef", "cd"), ("ab", "ef"))

    def test_not_found_keeps_whole_haystack(self) -> None:
        # Unlike before(), the "before" half is the haystack, not None.
        self.assertEqual(before_after("abcdef", "zz"), ("abcdef", None))
        self.assertIsNone(before("abcdef", "zz"))

    def test_match_at_end(self) -> None:
        self.assertEqual(before_after("abc", "c"), ("ab", ""))

    def test_empty_needle(self) -> None:
        self.assertEqual(before_after("abc", ""), ("", "abc"))

    def test_empty_haystack(self) -> None:
        self.assertEqual(before_after("", ","), ("", None))


# --------------------------------------------------------------------------- #
#  Cursor                                                                     #
# --------------------------------------------------------------------------- #
class CursorTests(unittest.TestCase):
    def test_tokenization(self) -> None:
        c = Cursor("a,b,c")
        self.assertEqual(c.pop(","), "a")
        self.assertEqual(c.remaining, "b,c")
        self.assertEqual(c.pop(","), "b")
        self.assertEqual(c.remaining, "c")
        self.assertEqual(c.pop(","), "c")
        self.assertIsNone(c.remaining)
        self.assertTrue(c.exhausted)

    def test_pop_on_exhausted_cursor_raises(self) -> None:
        c = Cursor("x")
        c.pop(",")
        with self.assertRaises(InvalidStateError):
            c.pop(",")
        self.assertTrue(issubclass(InvalidStateError, StrextError))
        self.assertTrue(issubclass(InvalidStateError, RuntimeError))

    def test_trailing_needle_leaves_empty_token(self) -> None:
        c = Cursor("a,")
        self.assertEqual(c.pop(","), "a")
        self.assertEqual(c.remaining, "")
        self.assertFalse(c.exhausted)
        self.assertEqual(c.pop(","), "")
        self.assertTrue(c.exhausted)

    def test_needle_may_change_between_pops(self) -> None:
        c = Cursor("key=value;rest")
        self.assertEqual(c.pop("="), "key")
        self.assertEqual(c.pop(";"), "value")
        self.assertEqual(c.remaining, "rest")

    def test_free_function(self) -> None:
        c = Cursor("k: v")
        self.assertEqual(pop_before(": ", c), "k")
        self.assertEqual(c.remaining, "v")

    def test_rejects_non_str(self) -> None:
        with self.assertRaises(TypeError):
            Cursor(None)  # type: ignore[arg-type]

    def test_drain(self) -> None:
        c = Cursor("a,,b")
        self.assertEqual(list(c.drain(",")), ["a", "", "b"])
        self.assertTrue(c.exhausted)

    def test_drain_validates_eagerly(self) -> None:
        with self.assertRaises(ValueError):
            Cursor("abc").drain("")
        c = Cursor("abc")
        list(c.drain(","))
        with self.assertRaises(InvalidStateError):
            c.drain(",")

    def test_repr(self) -> None:
        c = Cursor("a,b")
        self.assertEqual(repr(c), "Cursor('a,b')")
        c.pop("+")
        self.assertEqual(repr(c), "Cursor(None)")

    def test_satisfies_protocol(self) -> None:
        self.assertIsInstance(Cursor(""), TokenCursorProtocol)


class CursorTraceTests(unittest.TestCase):
    def _logger(self) -> tuple[logging.Logger, io.StringIO]:
        buf = io.StringIO()
        lg = logging.getLogger("strext.tests.cursor")
        lg.handlers.clear()
        lg.propagate = False
        lg.setLevel(logging.DEBUG)
        h = logging.StreamHandler(buf)
        h.setFormatter(logging.Formatter("%(message)s"))
        lg.addHandler(h)
        return lg, buf

    def test_pop_traced_when_enabled(self) -> None:
        lg, buf = self._logger()
        with patch.dict(os.environ, {"STREXT_TRACE_OPS": "1"}):
            Cursor("a,b", logger=lg).pop(",")
        self.assertIn("cursor pop", buf.getvalue())
        self.assertIn("'token': 'a'", buf.getvalue())

    def test_pop_silent_by_default(self) -> None:
        lg, buf = self._logger()
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("STREXT_TRACE_OPS", None)
            Cursor("a,b", logger=lg).pop(",")
        self.assertEqual(buf.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
