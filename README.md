# eve_anchor

Plan which planetary resources to harvest so that a set of outposts meets a
list of material requirements while maximising the total value of what is
produced. The plan is found by solving a linear program with SciPy.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Data files

Planning works from a directory of JSON catalogues: `celestials.json`,
`all_items_info.json`, `constellations_r.json`, `systems_r.json` and
`planet_exploit_resource.json`. If they come as a gzipped tarball holding a
`data/` directory, `eve_anchor.extract.extract_data(archive, target)` unpacks
it into `target`. It then replaces every `.gz` file in `<target>/data` with
its decompressed contents and returns the paths of those files.

```python
from eve_anchor.data import Catalog

catalog = Catalog.load("target/data")
system_id = catalog.find_system("Tanoo")
constellation_id = catalog.find_constellation_by_system("Tanoo")
```

`default_catalog()` loads the catalogue from `./target/data` on its first call
and returns that same catalogue on every later call. Functions that take an
optional `catalog` argument fall back to it.

## Describing requirements

A material list is tab-separated text whose first line is exactly the header
`ID\tNames\tQuantity\tValuation ` (note the trailing space). Each later line
with at least four fields becomes a `Material`; the item name is looked up in
the catalogue.

```python
from eve_anchor.objective import parse_decomposed_list

materials = parse_decomposed_list(text, catalog)
```

An empty text raises `ValueError("No header line.")`, a wrong first line
raises `ValueError("Invalid header line.")`.

## Solving

```python
from eve_anchor.cache import Cache
from eve_anchor.resource import Outpost
from eve_anchor.solver import solve_for_constellation

outposts = [Outpost(name="Outpost1", system="Tanoo", planets=12, arrays=26)]
cache = Cache(ttl=60.0)
result = solve_for_constellation(outposts, materials, 7.0, cache, catalog)
for resource, arrays in result:
    print(resource.key, resource.planet_id, resource.resource_type_id, arrays)
```

Successful results are cached under a key made of the outpost count, the
material count and the number of days, for as long as the cache's time to
live. When no optimal plan exists, `eve_anchor.problem.SolverError` is raised.
Cache hits and misses are logged through the `eve_anchor.solver` logger.

To check beforehand that every required material can be found near the given
outposts, call `eve_anchor.assertions.assert_materials_available`. It raises
`MaterialsUnavailableError`, whose message has one line per missing material.

For finer control, build a `eve_anchor.problem.ResourceHarvestProblem`
yourself from the outputs of `map_objective` and `map_constellation` in
`eve_anchor.objective`.

## Reports

`eve_anchor.report.solution_table(key, result, catalog)` renders the non-zero
allocations for one constellation as a fenced text table.
`material_table(materials)` renders a requirement list with compact values
such as `10.100M`. Both cut the table to fit a 2000-character chat message.

## What this package does not do

It is a library only. It has no command-line program, no chat bot, no web
API and no storage of members, capsuleers, outposts or problems; outposts are
passed in as `Outpost` values built by the caller.