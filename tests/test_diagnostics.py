import threading
import unittest
from unittest import mock
from boozetools.support.failureprone import SourceText

from flow2ts import flow
from flow2ts.diagnostics import Report, Unsupported, TooManyIssues
from flow2ts.naming import fresh_name, resolve_identifier

class WarningTests(unittest.TestCase):
	def test_same_message_once(self):
		report = Report()
		self.assertTrue(report.warn("lost something"))
		self.assertFalse(report.warn("lost something"))
		self.assertTrue(report.warn("lost something else"))
		self.assertEqual(["lost something", "lost something else"], report.warnings)
		self.assertTrue(report.ok(), "Warnings are not issues")

	def test_reports_are_independent(self):
		one, two = Report(), Report()
		one.warn("hello")
		self.assertTrue(two.warn("hello"))

	def test_reset(self):
		report = Report()
		report.warn("hello")
		report.reset()
		self.assertEqual([], report.warnings)
		self.assertTrue(report.warn("hello"))

	def test_threads_share_the_registry(self):
		report = Report()
		threads = [threading.Thread(target=report.warn, args=("shared",)) for _ in range(8)]
		for t in threads: t.start()
		for t in threads: t.join()
		self.assertEqual(["shared"], report.warnings)

	@mock.patch("sys.stderr")
	def test_verbose_warnings_are_printed(self, stderr):
		Report(verbose=1).warn("hello")
		self.assertTrue(stderr.write.called)

class IssueTests(unittest.TestCase):
	def test_unsupported_raises(self):
		with self.assertRaises(Unsupported) as cm:
			Report.unsupported("$Rest", "nope")
		self.assertEqual("$Rest", cm.exception.kind)
		self.assertEqual("$Rest: nope", str(cm.exception))

	def test_failed_is_recorded(self):
		report = Report()
		report.failed(Unsupported("$Rest", "nope", flow.StringType()))
		self.assertTrue(report.sick())
		self.assertIn("$Rest", report.issues[0].description)
		self.assertIn("StringType", report.issues[0].as_text())

	def test_picture_is_intro_then_illustrations(self):
		report = Report()
		report.failed(Unsupported("a", "one"))
		self.assertEqual("Could not translate a. one\n", report.issues[0].as_text())
		report.failed(Unsupported("b", "two", flow.StringType()), "here")
		self.assertEqual(["Could not translate b. two", ""], report.issues[1].as_text().splitlines()[:2])
		self.assertEqual(3, len(report.issues[1].as_text().splitlines()))

	def test_too_many(self):
		report = Report(max_issues=2)
		report.failed(Unsupported("a", "one"))
		with self.assertRaises(TooManyIssues):
			report.failed(Unsupported("b", "two"))

	def test_illustration_from_source(self):
		source = SourceText("type Callable = { (x: number): string };\n")
		node = flow.StringType()
		node.span = slice(18, 37)
		report = Report(source=source)
		report.failed(Unsupported("ObjectTypeCallProperty", "nope", node), "call signature")
		text = report.issues[0].as_text()
		self.assertIn("type Callable", text)
		self.assertIn("^^^ call signature", text)

	@mock.patch("sys.stderr")
	def test_assert_no_issues(self, stderr):
		report = Report()
		report.assert_no_issues("fine")
		report.failed(Unsupported("a", "one"))
		with self.assertRaises(AssertionError):
			report.assert_no_issues("not fine")

class NamingTests(unittest.TestCase):
	def test_fresh_names(self):
		self.assertEqual("a", fresh_name([]))
		self.assertEqual("c", fresh_name(["a", "b"]))
		self.assertEqual("aa", fresh_name([chr(c) for c in range(97, 123)]))

	def test_fresh_names_skip_reserved_words(self):
		alphabet = "abcdefghijklmnopqrstuvwxyz"
		taken = list(alphabet) + [x+y for x in "abc" for y in alphabet] + ["d"+y for y in "abcdefghijklmn"]
		self.assertEqual("dp", fresh_name(taken))  # Not "do"

	def test_resolve(self):
		self.assertEqual("Foo", resolve_identifier("Foo"))
		self.assertEqual("symbol_", resolve_identifier("symbol"))
		self.assertEqual("React.ReactNode", resolve_identifier("React$Node"))

if __name__ == '__main__':
	unittest.main()
