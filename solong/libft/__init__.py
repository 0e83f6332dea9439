"""Small character, string, linked-list, line-reading and printf helpers."""