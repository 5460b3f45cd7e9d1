import io
import json
import tempfile
from pathlib import Path
import unittest
from unittest import mock

from flow2ts import cmdline

base_folder = Path(__file__).parent
zoo_ok = base_folder/"zoo/ok"
zoo_fail = base_folder/"zoo/fail"

class CommandLineTests(unittest.TestCase):
	def run_with(self, *argv):
		args = cmdline.parser.parse_args([str(a) for a in argv])
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
				status = cmdline.run(args)
		return status, stdout.getvalue(), stderr.getvalue()

	def test_single_node(self):
		status, out, err = self.run_with(zoo_ok/"object_spread.json")
		self.assertEqual(0, status)
		self.assertEqual("TSIntersectionType", json.loads(out)["type"])

	def test_list_with_warnings(self):
		status, out, err = self.run_with(zoo_ok/"assorted.json")
		self.assertEqual(0, status)
		self.assertEqual(5, len(json.loads(out)))
		self.assertEqual(1, err.count("Existential type"))

	def test_verbose(self):
		status, out, err = self.run_with(zoo_ok/"assorted.json", "-v")
		self.assertEqual(0, status)
		self.assertIn("Entry 5 of 5", err)

	def test_output_file(self):
		with tempfile.TemporaryDirectory() as folder:
			target = Path(folder)/"out.json"
			status, out, err = self.run_with(zoo_ok/"function_declaration.json", "-o", target)
			self.assertEqual(0, status)
			self.assertEqual("", out)
			self.assertEqual("TSFunctionType", json.loads(target.read_text(encoding="utf-8"))["type"])

	def test_failures_do_not_stop_the_rest(self):
		status, out, err = self.run_with(zoo_fail/"assorted.json", "-s", zoo_fail/"call_property.js")
		self.assertEqual(1, status)
		self.assertEqual([None, None, None, None, {"type": "TSStringKeyword"}], json.loads(out))
		self.assertIn("ObjectTypeCallProperty", err)
		self.assertIn("type Callable = {", err)

	def test_too_many_issues(self):
		status, out, err = self.run_with(zoo_fail/"assorted.json", "--max-issues", 2)
		self.assertEqual(1, status)
		self.assertEqual("", out)
		self.assertIn("Giving up", err)

	def test_missing_file(self):
		status, out, err = self.run_with(zoo_ok/"no_such_file.json")
		self.assertEqual(2, status)
		self.assertIn("Could not read", err)

if __name__ == '__main__':
	unittest.main()
