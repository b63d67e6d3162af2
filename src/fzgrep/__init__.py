"""fzgrep: fuzzy grep.

Scans lines of files or the standard input, scores each line against a
query with a fuzzy subsequence matcher and returns the best matches,
optionally with surrounding context.

Usage:
    from fzgrep.search import find_matches, file_source

    report = find_matches("needle", [file_source("haystack.txt")])
    for record in report.records:
        print(record.score, record.line)
"""

__version__ = "0.1.0"
