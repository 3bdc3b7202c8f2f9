"""
Built-in demo program.

``jpplex`` scans this text when no input file is given. It exercises every
token rule: documentation, line and block comments, numbers and floats,
character, string and multi-line string literals, operators, separators and
special symbols.
"""

SAMPLE_PROGRAM = '''\
/**
 * Program entry point.
 *
 * @param args command line arguments
 */
int main() {
    // integer variable
    int a = 10; // trailing comment
    float b = 20.5;

    /* character literal */
    char c = 'A';

    // string literal
    String str = "Hello, World!";

    // multi-line string literal
    String multilineStr = """
        This is a
        multi-line string
        with multiple lines.
    """;

    // conditional
    if (a < b) {
        a++;
    } else {
        a--;
    }

    // operators
    int result = a + b * 2 / (1 - 3) == 10;

    // special symbols and separators
    @SpecialSymbol
    return result;
}
'''
