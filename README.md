# fuelup

A library for managing Fuel toolchains on disk. It knows where the fuelup
home and its parts live, reads and writes the user's settings, parses
toolchain names and `fuel-toolchain.toml` override files, creates custom
toolchains, and removes fuelup from a system.

## The fuelup home

Everything lives under `~/.fuelup`. The helpers in `fuelup.path` return
these locations:

| Path                            | Helper                    |
|---------------------------------|---------------------------|
| `~/.fuelup`                     | `fuelup_dir()`            |
| `~/.fuelup/bin`                 | `fuelup_bin_dir()`        |
| `~/.fuelup/bin/fuelup`          | `fuelup_bin()`            |
| `~/.fuelup/settings.toml`       | `settings_file()`         |
| `~/.fuelup/toolchains`          | `toolchains_dir()`        |
| `~/.fuelup/toolchains/<name>`   | `toolchain_dir(name)`     |
| `~/.fuelup/toolchains/<name>/bin` | `toolchain_bin_dir(name)` |
| `~/.fuelup/store`               | `store_dir()`             |
| `~/.fuelup/hashes`              | `hashes_dir()`            |
| `~/.fuelup/tmp`                 | `fuelup_tmp_dir()`        |
| `~/.fuelup/log`                 | `fuelup_log_dir()`        |

`canonical_fuelup_dir()` gives the home in display form (`$HOME/.fuelup`
when it is the default). `get_fuel_toolchain_toml()` walks up from the
working directory and returns the nearest `fuel-toolchain.toml`, or `None`.
`ensure_dir_exists(path)` and `is_executable(path)` are small filesystem
helpers.

## Target triples

```python
from fuelup.target_triple import TargetTriple

TargetTriple.parse("x86_64-unknown-linux-gnu")
TargetTriple.from_host()
TargetTriple.from_component(distributed_by_forc=True)   # e.g. "linux_amd64"
```

Only `aarch64`/`x86_64`, `apple`/`unknown` and `darwin`/`linux-gnu` are
accepted; anything else raises `ValueError`.

## Toolchain names

Distributable toolchains are written as `<channel>`, `<channel>-<target>`,
`<channel>-<YYYY-MM-DD>`, `<channel>-<YYYY-MM-DD>-<target>` or
`<channel>-<target>-<YYYY-MM-DD>`, where the channel is one of `latest`,
`nightly`, `testnet` or `mainnet`:

```python
from fuelup.description import DistToolchainDescription

desc = DistToolchainDescription.parse("nightly-2022-08-29-aarch64-apple-darwin")
desc.name, desc.date, desc.target
str(desc)   # channel, date and the host target joined with '-'
```

A missing target falls back to the host triple. Unknown channels raise
`ValueError`.

## Project overrides

A project may pin its toolchain and component versions in
`fuel-toolchain.toml`:

```toml
[toolchain]
channel = "nightly-2023-01-09"

[components]
forc = "0.33.0"
```

```python
from fuelup.toolchain_override import OverrideCfg, ToolchainOverride

cfg = OverrideCfg.from_toml(text)
cfg.to_string_pretty()
override = ToolchainOverride.from_project_root()
override.get_component_version("forc")
```

`latest` and `nightly` must carry a date; `testnet` and `mainnet` may be
written without one. An empty `[components]` table is rejected. An invalid
file found by `from_project_root()` is logged as a warning and ignored.

## Toolchains, settings and the store

- `fuelup.toolchain.Toolchain` describes a toolchain directory:
  `Toolchain.from_settings()` gives the default one (raising `LookupError`
  when none is set), `Toolchain.all()` lists installed names,
  `has_executables()` and `remove_executables()` look at its `bin`
  directory.
- `fuelup.toolchain_ops.new_toolchain(name)` creates an empty custom
  toolchain and makes it the default. Distributable names and names already
  in use raise `ValueError`.
- `fuelup.settings.SettingsFile` holds `settings.toml`; `read()` returns the
  settings and `edit()` is a context manager that saves changes.
- `fuelup.store.Store` gives the per-version directory of a component in the
  store (`<name>-<version>`) and whether it is present.

## Logging

`fuelup.logs.init_tracing()` sends debug output to an hourly rotated
`fuelup.log` in the log directory and info output to stdout.
`log_command()` and `log_environment()` record the command line and the
relevant environment.

## Uninstalling

`fuelup.self_ops.self_uninstall(force)` asks for confirmation unless
`force` is true, strips `.fuelup` entries from the `PATH` lines of the
shell start-up files listed by `fuelup.shell.Shell`, and removes the fuelup
home. `remove_path_from_content(text)` does the stripping on a string.

## What this package does not do

There is no command-line program. The package does not download, install
or update components or toolchains, does not fetch release channels, does
not check for updates, and does not run toolchain executables on the
user's behalf. The store only names component directories; filling them is
left to the caller.