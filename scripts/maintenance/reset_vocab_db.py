"""
Wipe the vocabulary store and start over with empty tables.

Drops and recreates `vocabulary` (saved words and their cards) and
`review_logs` (one row per rating). Nothing can be recovered afterwards.

Usage:
    python -m scripts.maintenance.reset_vocab_db
"""

from core import fsrs

TABLES = ("vocabulary", "review_logs")


def main():
    fsrs.init_db()
    stats = fsrs.get_vocabulary_stats()

    print(f"[RESET] Tables to drop: {', '.join(TABLES)}")
    print(f"[RESET] Saved words: {stats['total']} ({stats['due']} due now)")
    print("[RESET] Every card and its review history will be removed.")

    answer = input("Type 'yes' to drop both tables: ")

    if answer.strip().lower() != "yes":
        print("[RESET] Aborted, database left as it was.")
        return

    fsrs.reset_db()
    print(f"[RESET] Done. {len(TABLES)} empty tables ready.")


if __name__ == "__main__":
    main()
