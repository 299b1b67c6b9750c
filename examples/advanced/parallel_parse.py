"""One cursor per script: parse 1000 scenes in parallel."""

from concurrent.futures import ThreadPoolExecutor

from kagscript import parse

scenes = [f"*scene{i}|\n@bg storage=bg{i}.png\nLine {i}.[lr]\n" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, scenes))

print(f"Parsed {len(results)} scenes in parallel")
print("First scene children:", len(results[0].children))
