"""Character, string, memory, output, printf, linked-list and line-reading helpers."""