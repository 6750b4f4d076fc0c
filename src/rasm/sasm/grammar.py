''' Line grammar '''

import pyparsing as pp


# Operand classes
number = pp.Word(pp.nums)
register = pp.Word(pp.alphas, pp.alphanums)

# Instruction head and the raw text after it
mnemonic = pp.Regex(r'\S+')
statement = (mnemonic + pp.rest_of_line).parse_with_tabs()

# A quote without a closing partner is taken as plain text
quoted = pp.QuotedString('"', unquote_results=False)
stray_quote = pp.Literal('"')
plain = pp.CharsNotIn(',"')

operand = pp.Combine(pp.ZeroOrMore(quoted | plain | stray_quote))
operands = (operand + pp.ZeroOrMore(pp.Suppress(',') + operand)).parse_with_tabs()
