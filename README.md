# triagebot

Building blocks for a bot that helps triage issues and pull requests:

- a tokenizer and parsers for commands written in comments, such as
  `@bot label +bug`, `@bot claim`, `@bot ping compiler` or `r? @octocat`;
- detection of `@user` and `@org/team` mentions that skips anything inside
  code spans, code blocks and block quotes;
- loading and caching of a repository's `triagebot.toml` configuration.

The package uses only the standard library and supports Python 3.11 and
later.

## Parsing commands

`triagebot.parser.command.parse_commands(text, bots)` returns every command
in a comment that is addressed to one of the given bot names, together with
any `r?` review request (which is recognised whatever bot names are given).
Commands inside code or block quotes are skipped.

```python
from triagebot.parser.command import parse_commands

comment = "Thanks! @rustbot label +T-compiler -T-lang. Also r? @octocat"
for command in parse_commands(comment, ["rustbot"]):
    if command.is_ok():
        print(command.kind, command.value)
    else:
        print(command.kind, "failed:", command.error)
```

Each result is a `Command` with a `kind` (a `CommandKind`), the parsed
`value`, or the `CommandError` in `error` when the command was recognised
but could not be parsed. A failed command is still reported, so the bot can
reply with the error; `is_ok()` and `is_err()` tell the two cases apart.
`CommandError` shows the text around the failing position when printed.

`Input(text, bots)` is an iterator over the same commands and tracks how
much of the text has been consumed (`consumed()` and `remaining()`). A
command that fails to parse does not move the input past itself.

The individual grammars live in `triagebot.parser.commands`:

| Module       | Recognises                                                     |
|--------------|----------------------------------------------------------------|
| `assign`     | `claim`, `release-assignment`, `assign @user`; `parse_review` for the name after `r?` |
| `close`      | `close`                                                        |
| `glacier`    | `glacier "https://gist.github.com/..."`                        |
| `nominate`   | `nominate <team>`, `beta-nominate <team>`, `beta-accept`, `beta-approve` |
| `note`       | `note [remove] <title>`                                        |
| `ping`       | `ping <team>`                                                  |
| `prioritize` | `prioritize`                                                   |
| `relabel`    | `[modify] label[s] [to] [:] +a -b c`                           |
| `second`     | `second`, `seconded`                                           |
| `shortcut`   | `ready`, `review`, `reviewer`, `author`, `blocked`             |

Each module has a `parse(tokenizer)` function working on a
`triagebot.parser.token.Tokenizer`; it returns `None` when the input is not
its command and raises `CommandError` when it is but is malformed.
`triagebot.parser.token.tokenize(text)` returns the full token list of a
string.

## Finding mentions

```python
from triagebot.parser.mentions import get_mentions

get_mentions("cc @rust-lang/libs, see `@not-a-mention`")
# ['rust-lang/libs']
```

An `@` directly after an ASCII letter, as in `someone@example.com`, is not
a mention. The regions that are skipped are computed by
`triagebot.parser.ignore_block.IgnoreBlocks`.

## Repository configuration

`triagebot.config.parse_config` reads the text (or bytes) of a
`triagebot.toml` file into a `Config` whose sections (`relabel`, `assign`,
`ping`, `nominate`, `prioritize`, `major_change`, `autolabel`,
`notify_zulip`, `github_releases`, `review_submitted`, `mentions` and so on)
are `None` when absent.

```python
from triagebot.config import parse_config

config = parse_config("""
[relabel]
allow-unauthenticated = ["C-*"]

[ping.compiler]
message = "So many people!"
label = "T-compiler"
""")

name, team = config.ping.get_by_name("compiler")
```

`PingConfig.get_by_name` also finds a team by one of its aliases, and
`AutolabelConfig.get_by_trigger` lists the labels triggered by a given
label. `Config.from_mapping` builds a configuration from an already parsed
mapping.

Malformed files raise `MalformedConfiguration`; a missing file is reported
as `MissingConfiguration`, and a failed download as
`ConfigurationFetchError`. All three derive from `ConfigurationError`.

`ConfigCache.get(repo, fetch)` keeps each repository's configuration, or
its failure, for two minutes by default. `fetch` is a callable you supply
that returns the file contents, or `None` when the file does not exist.

## What is not included

The package does not talk to any hosting service, chat service or database:
it fetches no files itself, posts no comments, applies no labels and stores
nothing. It provides no command-line program or server; acting on the
parsed commands and configuration is left to the calling code. Changelogs
are only named by format (`ChangelogFormat`), not parsed.