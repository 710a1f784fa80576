# engramweb

Building blocks for a read-only browser of engram observations and for the
keyboard-driven installer that sets up its companion components. The package
has no third-party dependencies.

## Modules

- `engramweb.version`: the package version string and semantic version parsing and comparison.
- `engramweb.links`: back-link validation, canonical project URLs, Referer reduction, theme and sort helpers.
- `engramweb.observations`: the `Observation` record and filtering, sorting and sibling lookup.
- `engramweb.tui.state`: `State`, `Tab`, `Item`, `Result` and tab cycling.
- `engramweb.tui.model`: the installer state machine, `Model`, and the `Command` it returns.
- `engramweb.tui.view`: plain-text rendering of a `Model`.

## Versions

```python
from engramweb.version import current, parse, compare

current()                     # "dev"
parse("v1.2.3")               # (1, 2, 3)
compare("v2.5.0", "v2.4.9")   # positive
compare("dev", "v1.0.0")      # negative: "dev" sorts before any release
```

`parse` accepts an optional leading `v` and raises `ValueError` for `"dev"`,
an empty string, or anything that is not three dot-separated integers.
`compare` falls back to plain string comparison when either side does not
parse.

## Links

```python
from engramweb.links import (
    validate_from, build_source_url, safe_referer, next_theme, normalize_sort,
)

validate_from("/p/alpha?type=decision")    # "/p/alpha?type=decision"
validate_from("//evil.example.com")        # ""
validate_from("/p/foo/../../etc/passwd")   # ""

build_source_url("alpha", "decision", "", "date_asc", True, "")
# "/p/alpha?type=decision&sort=date_asc"

safe_referer("http://example.com/p/alpha?q=foo", "example.com")   # "/p/alpha?q=foo"
safe_referer("http://evil.example/steal", "example.com")          # "/"

next_theme("light")        # "dark"
next_theme("")             # "light"
normalize_sort("garbage")  # "date_desc"
```

`validate_from` rejects empty values, values longer than 2048 characters,
anything not starting with `/`, values starting with `//`, and any value
containing `..`; a rejected value comes back as `""`. It does not decode its
input.

`build_source_url` emits parameters in the order type, q, sort,
topic_key_prefix, leaves out empty ones, includes sort only when
`sort_explicit` is true, and query-escapes each value.

## Observation lists

```python
from engramweb.observations import (
    Observation, filter_by_type, filter_by_topic_key_prefix, distinct_types,
    union_types, sorted_observations, latest_activity, compute_siblings,
)

union_types(["decision", "spec"], ["custom-internal"], "phantom-type")
# ["custom-internal", "decision", "phantom-type", "spec"]
```

- `filter_by_type` and `filter_by_topic_key_prefix` narrow a list; an empty
  type or prefix returns the list unchanged.
- `distinct_types` returns the sorted non-empty types present.
- `sorted_observations` sorts by `created_at`, oldest first for `"date_asc"`
  and newest first otherwise.
- `latest_activity` returns the greatest timestamp string, or `""`.
- `compute_siblings(observation, fetch_recent)` applies only when the topic
  key has at least two `/`. It calls `fetch_recent(project, 200)`, keeps
  those under the key's prefix (the key minus its last segment), sorts them by
  `created_at`, and caps the list at 20. It returns
  `(siblings, prefix, has_more)`. The observation itself is always in the
  list, also when `fetch_recent` raises or the cap would drop it.

## Installer model

```python
from engramweb.tui.state import Item, Result, State, Tab
from engramweb.tui.model import Command, Model
from engramweb.tui.view import render

items = [Item("autostart", Tab.SERVER, "Run automatically on login")]
model = Model(items, {"autostart": State.NOT_INSTALLED})

model.handle_key(" ")        # stages autostart -> installed
model.handle_key("4")        # jump to the Review tab
print(render(model))
model.handle_key("enter")    # Command.APPLY; model.applying is now True

model.finish_apply(
    [Result("autostart", True, action="installed")],
    {"autostart": State.INSTALLED},
)
```

`handle_key` understands `tab`/`right`/`l`, `shift+tab`/`left`/`h`, `1`–`4`,
`up`/`k`, `down`/`j`, space, `enter`, and `q`/`esc`/`ctrl+c`. Quitting with
staged changes first asks for confirmation (`y` returns `Command.QUIT`, `n`
or `esc` cancels); `ctrl+c` quits at once. The cursor skips unavailable rows,
and unavailable rows cannot be toggled. While `applying` is set, keys are
ignored.

`engramweb.tui.view` offers `render(model)` for the whole screen,
`render_row(model, item, selected)` for one row and `render_review(model)` for
the Review tab.

## What the package does not do

It contains no web server, HTML pages or HTTP client for an engram service;
the link and observation helpers are meant to be used by one. The installer
model does not find the installable items, detect their state on disk, install
or remove anything, or drive a terminal: the caller supplies the items and
states, carries out `Command.APPLY`, and displays the output of `render`.