"""
Sample exam papers loaded by ``flask seed-exams``.
"""

CSC_451_2024 = {
    'course': 'CSC 451: Computer Networks and Communications',
    'course_title': 'Computer Networks and Communications',
    'course_code': 'CSC 451',
    'department': 'Computer Science Department',
    'university': 'Abia State University, Uturu',
    'semester': 'First',
    'year': 2024,
    'exam_session': '2024/2025',
    'instructions': 'ANSWER QUESTION 1 AND ANY OTHER 3 QUESTIONS.\nTIME ALLOWED: 2HRS.',
    'questions': [
        {
            'number': '1',
            'text': 'What are the input strings for the following languages:\n'
                    '(i) S → aASBb/€, A → a/€, B → bcd\n'
                    '(ii) S → ASBBC, A → e/€, B → bbc/€, C → €\n'
                    '(iii) S → aAb, aA → aaAb, A → €',
        },
        {
            'number': '2',
            'text': '(i) What is a token?\n'
                    '(ii) Give four types of token with their valid examples.\n'
                    '(iii) Discuss the analysis and synthesis phases of a typical compiler.',
        },
        {
            'number': '3',
            'text': '(i) Why is symbol table called a book keeper?\n'
                    '(ii) In symbol table entries, appropriately classify the following expressions:\n'
                    '(a) int x = 10;\n'
                    '(b) System.out.println("ABSU Students are wonderful");\n'
                    '(c) Float pie = 3.142;',
        },
        {
            'number': '4',
            'text': 'T is the set of terminals, V is the set of non-terminals, P is the productions '
                    'and S is the starting symbol. In a tabular form, determine the T, V, P and S '
                    'of the following grammars:\n'
                    '(a) S → ABSe/€\n'
                    '(b) aA → E + e/E + E\n'
                    '(c) AB → E/€',
        },
        {
            'number': '5',
            'text': 'Construct a top-down parser for the following:\n'
                    '(a) S → cAd, A → ab/a, w(input string = cad)\n'
                    '(b) S → aBC, B → cd, C → ad/e/. Input string = acde',
        },
        {
            'number': '6',
            'text': 'Construct a bottom-up parser using the input string abcde for the following grammar:\n'
                    '(a) A → ab, B → de, C → bc, S → ACB\n'
                    '(b) S → bb, C → a, E → cd, D → e, S → CED',
        },
    ],
}

SEED_RECORDS = [CSC_451_2024]
