"""
A stand-in for `ispell -a` with a tiny built-in dictionary.

Speaks enough of the pipe protocol for the tests: a banner on startup,
`^`-prefixed analysis lines answered with a blank-line terminated block,
and the one-character commands.

Environment:
    FAKE_ISPELL_FAIL  exit before printing the banner
    FAKE_ISPELL_DICT  file the `#` command writes added words to
"""

import os
import re
import sys

WORDS = {"hello", "world", "the", "is", "a", "this", "line", "test", "and", "don't"}
ROOTS = {"hacking": "hack", "checked": "check"}
COMPOUNDS = {"sunflower"}
MISSES = {
    "perl": ["Perl", "peal", "pearl"],
    "teh": ["the", "tech"],
    "hellothere": ["hello there", "hello-there"],
}
GUESSES = {"hackable": ["hack+able"]}

TERM = re.compile(r"[A-Za-z0-9']+")


class Engine:
    def __init__(self):
        self.terse = False
        self.exact = set()
        self.lower = set()
        self.saved = []

    def known(self, word: str) -> bool:
        return word in WORDS or word in self.exact or word.lower() in self.lower

    def judge(self, word: str, offset: int) -> str | None:
        if self.known(word):
            return None if self.terse else "*"
        if word in ROOTS:
            return None if self.terse else f"+ {ROOTS[word].upper()}"
        if word in COMPOUNDS:
            return None if self.terse else "-"
        if word in MISSES:
            m = MISSES[word]
            return f"& {word} {len(m)} {offset}: {', '.join(m)}"
        if word in GUESSES:
            return f"? {word} 0 {offset}: {', '.join(GUESSES[word])}"
        return f"# {word} {offset}"

    def analyze(self, text: str) -> list[str]:
        out = []
        for m in TERM.finditer(text):
            if m.group().isdigit():
                continue
            # ispell counts bytes, not characters
            offset = len(text[:m.start()].encode("utf-8")) + 1
            line = self.judge(m.group(), offset)
            if line is not None:
                out.append(line)
        return out

    def handle(self, line: str) -> list[str] | None:
        code, arg = line[:1], line[1:]
        if code == "^":
            return self.analyze(arg)
        if code == "*":
            self.exact.add(arg)
            self.saved.append(arg)
        elif code == "&":
            self.lower.add(arg.lower())
            self.saved.append(arg.lower())
        elif code == "@":
            self.exact.add(arg)
        elif code == "#":
            path = os.environ.get("FAKE_ISPELL_DICT")
            if path:
                with open(path, "w") as f:
                    f.write("\n".join(self.saved) + "\n")
        elif code == "!":
            self.terse = True
        elif code == "%":
            self.terse = False
        elif code in ("-", "~"):
            pass
        else:
            return self.analyze(line)
        return None


def main():
    if os.environ.get("FAKE_ISPELL_FAIL"):
        sys.exit(1)
    if sys.argv[1:3] != ["-a", "-S"]:
        sys.stderr.write(f"unexpected arguments: {sys.argv[1:]}\n")
        sys.exit(2)

    sys.stdin.reconfigure(encoding="utf-8")
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stdout.write("@(#) International Ispell Version 3.4.05 (fake)\n")
    sys.stdout.flush()

    engine = Engine()
    for raw in sys.stdin:
        answer = engine.handle(raw.rstrip("\n"))
        if answer is None:
            continue
        for line in answer:
            sys.stdout.write(line + "\n")
        sys.stdout.write("\n")
        sys.stdout.flush()


if __name__ == "__main__":
    main()
