"""
Unit tests for the command line interface.
"""

import io
import json
import logging
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from resume_engine.cli import load_jobs, main
from resume_engine.core import ResumeEngine
from tests.samples import SAMPLE_RESUME


class TestCli(unittest.TestCase):
    """Run CLI commands against temporary files."""

    def setUp(self):
        self.root = logging.getLogger()
        self.saved_handlers = list(self.root.handlers)
        self.saved_level = self.root.level

        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = self._path("config.json")
        self.resume_path = self._write("resume.txt", SAMPLE_RESUME)
        self.jobs_path = self._write("jobs.json", json.dumps([
            {
                "id": "py",
                "title": "Senior Python Engineer",
                "company": "Initech",
                "description": "Python and AWS services",
                "requiredSkills": ["Python", "AWS"],
                "postedAt": "2026-10-17T09:00:00Z",
            },
            {
                "id": "java",
                "title": "Java Developer",
                "description": "Spring services in Java",
            },
        ]))

    def tearDown(self):
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)
        self.temp_dir.cleanup()

    def _path(self, name):
        return os.path.join(self.temp_dir.name, name)

    def _write(self, name, content):
        path = self._path(name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def _run(self, *args):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--config", self.config_path, *args])
        return out.getvalue()

    def test_parse_prints_json(self):
        data = json.loads(self._run("parse", self.resume_path))
        self.assertEqual(data["personalInfo"]["name"], "Jane Doe")
        self.assertIn("python", data["skills"])
        self.assertEqual(data["experience"][0]["startDate"], "Jan 2020")

    def test_parse_writes_output_file(self):
        output = self._path("structured.json")
        self._run("parse", self.resume_path, "--output", output)
        with open(output) as f:
            self.assertEqual(json.load(f)["languages"], ["English", "Spanish"])

    def test_score_json(self):
        data = json.loads(self._run("score", self.resume_path, "--json"))
        self.assertEqual(data["skillMatch"], 65)
        self.assertEqual(data["resumeStructure"], 100)
        self.assertIn("total", data)

    def test_score_text(self):
        output = self._run("score", self.resume_path)
        self.assertIn("ATS Score", output)
        self.assertIn("Skill Match", output)

    def test_match_json(self):
        data = json.loads(self._run("match", self.resume_path, "--job", self.jobs_path, "--json"))
        self.assertEqual(data["jobId"], "py")
        self.assertEqual(data["matchedSkills"], ["Python", "AWS"])
        self.assertEqual(data["missingSkills"], [])

    def test_rank_json(self):
        data = json.loads(self._run(
            "rank", self.resume_path, "--jobs", self.jobs_path, "--limit", "1", "--json",
        ))
        self.assertEqual([m["jobId"] for m in data], ["py"])

    def test_rank_text(self):
        output = self._run("rank", self.resume_path, "--jobs", self.jobs_path, "--sequential")
        self.assertIn("Top 2 of 2 jobs", output)
        self.assertIn("Senior Python Engineer @ Initech", output)

    def test_config_set(self):
        self._run("config", "--set", "matching.default_limit", "5")
        with open(self.config_path) as f:
            self.assertEqual(json.load(f)["matching"]["default_limit"], 5)

    def test_missing_resume_exits_with_error(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run("score", self._path("missing.txt"))
        self.assertEqual(ctx.exception.code, 1)

    def test_no_command_exits_with_error(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run()
        self.assertEqual(ctx.exception.code, 1)


class TestLoadJobs(unittest.TestCase):
    """Test job file ingestion."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.engine = ResumeEngine()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, data):
        path = os.path.join(self.temp_dir.name, "jobs.json")
        with open(path, 'w') as f:
            json.dump(data, f)
        return path

    def test_required_skills_filled_from_description(self):
        jobs = load_jobs(self._write([{"title": "Dev", "description": "Spring services in Java"}]), self.engine)
        self.assertEqual(jobs[0].required_skills, ("java", "spring"))

    def test_single_object(self):
        jobs = load_jobs(self._write({"id": 7, "title": "Dev", "requiredSkills": ["Go"]}), self.engine)
        self.assertEqual(len(jobs), 1)
        self.assertEqual(jobs[0].id, "7")
        self.assertEqual(jobs[0].required_skills, ("Go",))

    def test_posted_at_parsed(self):
        jobs = load_jobs(self._write([{"title": "Dev", "postedAt": "2026-10-17T09:00:00Z"}]), self.engine)
        self.assertEqual(jobs[0].posted_at.year, 2026)
        self.assertIsNotNone(jobs[0].posted_at.tzinfo)


if __name__ == "__main__":
    unittest.main()
