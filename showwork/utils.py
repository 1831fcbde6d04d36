from showwork.global_vars import MAX_MSG_LEN


# Wraps text in a Discord code block
def code_block(text):
    return f"```\n{text}\n```"


# Sends obj to the channel of ctx as code blocks, working around Discord's message length limit
# param obj - message content, a list is sent one item per line
# param ctx - anything with an async send() method
async def package_message(obj, ctx):
    if isinstance(obj, (list, tuple)):
        obj = '\n'.join([str(i) for i in obj])

    for chunk in split_message(obj, MAX_MSG_LEN - len(code_block(''))):
        await ctx.send(code_block(chunk))


# Breaks text into pieces no longer than limit, preferring to cut at newlines
def split_message(text, limit=MAX_MSG_LEN):
    chunks = []
    i = 0

    while i < len(text):
        end_index = limit

        if i + limit < len(text):
            end_index = text[i:i + limit].rfind('\n')
            end_index = limit if end_index <= 0 else end_index

        chunks.append(text[i:i + end_index])
        i += end_index

        # Drop the newline the chunk was cut at
        if i < len(text) and text[i] == '\n':
            i += 1

    return chunks
