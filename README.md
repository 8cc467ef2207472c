# cdkpw

`cdkpw` wraps the CDK command line. It looks at the stack you are working on
and, when you have not given a `--profile` yourself, adds the AWS profile that
your configuration assigns to that stack. All arguments are otherwise handed
to `cdk` unchanged.

## Installation

```
pip install .
```

## Usage

Run `cdkpw` in place of `cdk`:

```
cdkpw diff ProdAppStack
cdkpw deploy DevWorkerStack --exclusively
cdkpw deploy ProdAppStack --profile other   # an explicit profile is kept as-is
```

A profile is only chosen for the `diff`, `deploy`, `destroy` and `bootstrap`
actions. The first argument after the action that does not start with `-` is
taken as the stack name. `-c`/`--context` switches (with their values) and
other flags are recognised and passed through.

If the configuration file cannot be found, read or parsed, `cdkpw` prints
`Error loading config:` followed by the reason and exits with status 1.

When `cdk` fails, `cdkpw` prints `Error running cdk command:` with the reason
and exits with a non-zero status: the one `cdk` returned, or a failure status
if `cdk` could not be started at all.

## Configuration

The configuration file is read from `$CDKPW_CONFIG` if that variable is set,
and from `~/.cdk/.cdkpw.yml` otherwise.

```yaml
profiles:
  - match: Prod
    profile: prod_admin
  - match: Dev
    profile: dev_admin
cdkLocation: /usr/local/bin/cdk   # optional, defaults to "cdk"; $VAR and ${VAR} are expanded
verbose: 1                        # 0 silent, 1 info, 2 debug
```

Each `match` is a substring tested against the stack name; the first entry
that matches wins. With `verbose` at 1 or higher, `cdkpw` reports which
profile it chose:

```
cdkpw: Using profile prod_admin for stack ProdAppStack
```

## Use from Python

```python
from cdkpw.args import parse_args
from cdkpw.config import load_config

command = parse_args(["deploy", "ProdAppStack"])
config = load_config()
if not command.is_profiled():
    found = config.find_profile(command.stack_name)
    if found is not None:
        command.set_profile(found)
command.execute(config.cdk_location)
```

- `cdkpw.args.parse_args(args)` returns a `CDKCommand` with `action`,
  `stack_name`, `profile`, `raw_args`, `context` and `flags`.
- `CDKCommand.set_profile(profile)` sets the profile and appends
  `--profile <profile>` to `raw_args`, unless a profile is already set.
- `CDKCommand.execute(cdk)` runs the given executable with `raw_args`, raising
  `SystemExit` when it fails.
- `cdkpw.config.get_config_file()` returns the configuration path;
  `load_config()` returns a `Config` holding `profiles`, `cdk_location` and
  `verbose`, and raises `ConfigError` when the file cannot be located, read or
  parsed.
- `cdkpw.cli.main(argv=None)` does what the `cdkpw` command does and returns
  its exit status.