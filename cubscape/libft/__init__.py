"""Character, memory, string, conversion, output, list, formatting and line-reading helpers."""