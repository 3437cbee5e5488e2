"""Solutions to the daily puzzles, one module per solved day."""