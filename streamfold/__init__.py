"""
streamfold - wrap a character stream at a fixed column.

The command line front end lives in streamfold.main; the wrapping state
machine lives in streamfold.engine and can be used on its own:

    from streamfold.engine import fold_text

    fold_text("a" * 100, width=40)
"""
