from pathlib import Path
import json
import os
import subprocess
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"


def _run_module(module: str, *args: str) -> str:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(SRC), env.get("PYTHONPATH", "")) if p)
    cmd = [sys.executable, "-m", module, *args]
    out = subprocess.run(cmd, cwd=ROOT, env=env, check=True, capture_output=True, text=True)
    return out.stdout


class ComparisonCLITests(unittest.TestCase):
    def test_cli_csv_output(self) -> None:
        stdout = _run_module("seedbound.comparison_cli", "--scenario", "bridged", "--presets", "degree,bfs")
        lines = stdout.strip().splitlines()
        self.assertTrue(lines[0].startswith("method,path_count"))
        self.assertEqual(len(lines), 3)

    def test_cli_markdown_output(self) -> None:
        stdout = _run_module(
            "seedbound.comparison_cli",
            "--nodes",
            "80",
            "--presets",
            "degree,adaptive",
            "--format",
            "markdown",
        )
        self.assertIn("# Expansion Comparison", stdout)


class ExpansionCLITests(unittest.TestCase):
    def test_cli_table_output(self) -> None:
        stdout = _run_module("seedbound.expansion_cli", "--preset", "degree")
        self.assertIn("from_seed,to_seed,length,salience,nodes", stdout)
        self.assertIn("bridge", stdout)

    def test_cli_json_output(self) -> None:
        stdout = _run_module(
            "seedbound.expansion_cli",
            "--preset",
            "adaptive",
            "--scenario",
            "ba",
            "--nodes",
            "60",
            "--format",
            "json",
        )
        payload = json.loads(stdout)
        self.assertIn("paths", payload)
        self.assertIn("final_phase", payload)

    def test_cli_seed_override(self) -> None:
        stdout = _run_module("seedbound.expansion_cli", "--seeds", "l1,bridge", "--max-nodes", "50")
        self.assertIn("l1", stdout)

    def test_cli_composes_named_policies(self) -> None:
        stdout = _run_module("seedbound.expansion_cli", "--priority", "fifo", "--termination", "full_pairwise")
        self.assertIn("l0 L bridge R r0", stdout)
        self.assertIn("reason=policy", stdout)


if __name__ == "__main__":
    unittest.main()
