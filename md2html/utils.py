import contextlib
import cProfile
import logging


@contextlib.contextmanager
def cpu_profile(path):
	"""
	Profiles the enclosed block with cProfile and dumps the stats to path.
	Does nothing if path is empty.

	If path can not be created, profiling is skipped
	and the block is still executed.
	"""
	if not path:
		yield None
		return
	try:
		#creating the file upfront to report unwritable paths before the run
		open(path, "wb").close()
	except OSError as ex:
		logging.error(f"Could not create cpu profile {path}: {ex}")
		yield None
		return

	profiler = cProfile.Profile()
	profiler.enable()
	try:
		yield profiler
	finally:
		profiler.disable()
		profiler.dump_stats(path)
		logging.debug(f"CPU profile written to {path}")
