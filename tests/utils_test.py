#!/usr/bin/env python3
import os
import pstats
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from md2html import utils


def test_no_profiling():
	with utils.cpu_profile("") as profiler:
		assert profiler is None


def test_profiling(tmp_path):
	path = str(tmp_path / "cpu.prof")
	with utils.cpu_profile(path) as profiler:
		assert profiler is not None
		sum(range(1000))
	stats = pstats.Stats(path)
	assert stats.total_calls > 0


def test_unwritable_profile(tmp_path):
	path = str(tmp_path / "missing" / "cpu.prof")
	executed = False
	with utils.cpu_profile(path) as profiler:
		assert profiler is None
		executed = True
	assert executed
	assert not os.path.exists(path)
