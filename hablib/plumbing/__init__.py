"""
Low-level APIs for driving the `hab` command-line tool.

Each public function or method in this package should:

- run a single `hab` command, or none at all
- raise an exception on any failures, with the tool's output attached where there is some
- accept collaborators (e.g. an `Executor`) as arguments rather than creating their own
"""
