# Collects every analysis pass into one result dict and renders it as text or JSON.
import json
from typing import Any, Dict, List, Optional

import pandas as pd

from . import hexview, patterns, search, strings
from .summary import summarize


def collect(data: bytes, conf: Dict[str, Any], term: Optional[str] = None,
            utf16: bool = False, with_summary: bool = False,
            name: str = "") -> Dict[str, Any]:
    res: Dict[str, Any] = {"input": name, "size_bytes": len(data)}
    if with_summary:
        res["summary"] = summarize(data)

    off, length = conf["offset"], conf["dump_bytes"]
    try:
        res["dump"] = {"offset": off, "length": length,
                       "rows": list(hexview.format_rows(data, off, length))}
    except hexview.DumpRangeError as e:
        res["dump"] = {"offset": off, "length": length, "error": str(e)}

    res["search"] = []
    if term:
        for label, needle in search.encodings(term, utf16):
            res["search"].append({"term": term, "encoding": label or "utf-8", "needle": needle,
                                  "hits": search.search(data, needle, conf["context"])})

    res["patterns"] = patterns.detect(
        data, sizes=conf["pattern_sizes"], lookahead=conf["lookahead"],
        min_occurrences=conf["min_occurrences"], max_patterns=conf["max_patterns"],
        max_examples=conf["max_examples"])

    limit = conf["max_strings"]
    res["strings"] = list(strings.extract(data, min_length=conf["min_string_length"],
                                          limit=limit, flush_trailing=conf["flush_trailing"]))
    res["strings_capped"] = len(res["strings"]) >= limit
    return res


def dump_error(res) -> Optional[str]:
    return res["dump"].get("error")


# ---------------- TEXT ----------------

def _dump_lines(data: bytes, offset: int, length: int) -> List[str]:
    return [""] + hexview.dump(data, offset, length)


def pattern_lines(rep: patterns.PatternReport) -> List[str]:
    out = ["", "=== Record Structure Analysis ==="]
    if not rep.groups:
        out.append("No obvious repeating patterns found")
        return out
    out.append("Potential record delimiters found:")
    n = rep.max_examples
    for g in rep.groups:
        offs = ", ".join(f"0x{o:X}" for o in g.examples(n))
        dists = ", ".join(str(d) for d in g.distances()[:n])
        out.append(f"Pattern: 0x{g.pattern.hex()} appears at offsets: {offs} (Distances: {dists})")
    if rep.truncated:
        out.append("... and more patterns")
    return out


def string_lines(runs: List[strings.StringRun], capped: bool) -> List[str]:
    out = ["", "Potential text strings found:"]
    out += [f"Offset 0x{r.offset:X}: {r.text}" for r in runs]
    if capped:
        out.append("... and more text strings")
    return out


def render_text(data: bytes, res: Dict[str, Any]) -> str:
    out = [f"File size: {res['size_bytes']} bytes"]
    s = res.get("summary")
    if s:
        out += [f"SHA256: {s['sha256']}",
                f"Shannon entropy: {s['entropy_bits_per_byte']} bits/byte",
                f"Zero bytes: {s['pct_zero']}%"]

    d = res["dump"]
    if "error" not in d:
        out += [""] + hexview.framed(d["offset"], d["rows"])

    for sec in res["search"]:
        tag = "" if sec["encoding"] == "utf-8" else f" ({sec['encoding']})"
        out += ["", f"=== Searching for: {sec['term']}{tag} ==="]
        if not sec["hits"]:
            out.append("String not found in file")
        for h in sec["hits"]:
            out.append(f"Found at offset: 0x{h.offset:X} ({h.offset})")
            out += ["", "Context:"]
            out += _dump_lines(data, h.context_start, h.context_length)

    out += pattern_lines(res["patterns"])
    out += string_lines(res["strings"], res["strings_capped"])
    return "\n".join(out) + "\n"


# ---------------- JSON ----------------

def _records(df: pd.DataFrame) -> list:
    return json.loads(df.to_json(orient="records"))


def render_json(res: Dict[str, Any]) -> str:
    rep = res["patterns"]
    dfp = pd.DataFrame(rep.rows(), columns=["pattern", "size", "count", "offsets", "distances"])
    dfs = pd.DataFrame(res["strings"], columns=list(strings.StringRun._fields))
    doc = {
        "input": res["input"],
        "size_bytes": res["size_bytes"],
        "dump": res["dump"],
        "search": [{"term": sec["term"], "encoding": sec["encoding"],
                    "needle_hex": sec["needle"].hex(),
                    "hits": _records(pd.DataFrame(sec["hits"], columns=list(search.SearchHit._fields)))}
                   for sec in res["search"]],
        "patterns": {"total": rep.total, "truncated": rep.truncated, "groups": _records(dfp)},
        "strings": {"capped": res["strings_capped"], "runs": _records(dfs)},
    }
    if "summary" in res:
        doc["summary"] = res["summary"]
    return json.dumps(doc, indent=2)
