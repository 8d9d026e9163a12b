import os
import json
from datetime import datetime, timezone

LOG_PATH = os.getenv("PENGUIN_LOG_PATH", "logs/generations.log")


def write_log(complexity, use_whole_words, length, count, word_count,
              hash_mode="none", seeded=False, log_path=None):
    # JSON line format. Never receives the passwords or the base words.
    path = log_path or LOG_PATH
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "complexity": complexity,
        "use_whole_words": use_whole_words,
        "length": length,
        "count": count,
        "word_count": word_count,
        "hash_mode": hash_mode,
        "seeded": seeded,
    }

    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry) + "\n")
    return entry
