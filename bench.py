import pyperf

from propparse import parse_property

DATA = "key_{}: \"{}\"".format("x" * 100, "value " * 1000)


runner = pyperf.Runner()
runner.bench_func("property_parser", lambda: parse_property(DATA))
