# -*- coding: utf-8 -*-
'''
    inflector
    ~~~~~~~~~

    Rule-based inflections for Python: pluralization, singularization, case
    conversion and transliteration, after Ruby on Rails' inflector.

    :copyright: (c) 2012-2015 by Janne Vanhala

    :license: MIT, see LICENSE for more details.
'''
import logging
import re
import threading
from collections import namedtuple

from unidecode import unidecode

__version__ = '0.1.0'

log = logging.getLogger(__name__)

DEFAULT_LOCALE = 'en'
NAMESPACE_SEPARATOR = '.'


def _ci_re(pattern):
    return '(?i:%s)' % (pattern, )


def _as_re(string):
    string = re.escape(string)
    string = _ci_re(string)
    return r'\b%s\Z' % (string, )


def _transform_group(func, group=0):
    def _match(match):
        s = match.group(group)
        return func(s)

    return _match


_match_group_lower = _transform_group(str.lower)
_match_group_upper = _transform_group(str.upper)


def _flatten(items):
    for item in items:
        if isinstance(item, str):
            yield item
        else:
            for word in _flatten(item):
                yield word


class Literal(str):
    '''Marks a rule matcher as a literal word instead of a regular expression.

        >>> inst.plural(Literal('fish'), 'fishies')

    A literal matches the trailing word of the input, ignoring case, and its
    replacement is inserted verbatim.
    '''
    __slots__ = ()


class Rule(namedtuple('Rule', 'pattern replacement')):
    '''A pattern rule. The pattern may be a source string or a compiled
    :class:`re.Pattern`; sources are compiled on first use, so a malformed
    pattern raises :class:`re.error` from the call that tries it.
    '''
    __slots__ = ()

    def apply(self, word, count=0):
        return re.subn(self.pattern, self.replacement, word, count=count)


class LiteralRule(namedtuple('LiteralRule', 'word replacement')):
    __slots__ = ()

    def apply(self, word, count=0):
        replacement = self.replacement
        return re.subn(_as_re(self.word), lambda match: replacement, word, count=count)


def _make_rule(rule, replacement):
    if isinstance(rule, Literal):
        return LiteralRule(str(rule), replacement)
    return Rule(rule, replacement)


class Inflections(object):
    '''.. class:: Inflections([locale : str])

    An instance of this class is yielded by :meth:`Inflections.instance` (or
    :func:`inflections`), which can then be used to specify additional
    inflection rules. Each locale gets its own instance, built on first use
    and seeded by the loader registered for it in :attr:`loaders`. Only rules
    for English are provided. This class implements the context manager
    protocol so it can be used in `with` blocks; the block holds the
    instance's lock.

        >>> with Inflections.instance('en') as inst:
        ...     inst.acronym('HTTP')
        ...
        ...     inst.plural(_ci_re(r'^(ox)$'), r'\\1en')
        ...     inst.singular(_ci_re(r'^(ox)en'), r'\\1')
        ...
        ...     inst.irregular('octopus', 'octopi')
        ...
        ...     inst.uncountable('equipment')

    New rules are added at the top. So in the example above, the irregular rule
    for octopus will now be the first of the pluralization and singularization
    rules that is run. This guarantees that your rules run before any of the
    rules that may already have been pre-loaded.

    Rule lists are never mutated in place: every change swaps in a new list
    while holding the lock, so a transformation running in another thread
    keeps walking the list it started with.

    :param str locale: The localization this object represents.
    '''
    loaders = {}

    __instances = {}
    __instances_lock = threading.Lock()
    __scopes = ('humans', 'plurals', 'singulars', 'uncountables')
    __camelize_pattern = r'\A(?:%s(?=\b|[A-Z_])|\w)'
    __underscore_pattern = r'(?:(?<=([A-Za-z\d]))|\b)(%s)(?=\b|[^a-z])'
    __empty_pattern = r'(?=a)b'

    def __init__(self, locale=DEFAULT_LOCALE):
        self.locale = locale
        self._lock = threading.RLock()
        self.acronyms = {}
        self.acronym_regex = self.__empty_pattern
        self.humans = []
        self.plurals = []
        self.singulars = []
        self.uncountables = []

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, *args):
        self._lock.release()

    def __repr__(self):
        return '<%s %r: %d plurals, %d singulars, %d uncountables, %d acronyms>' % (
            type(self).__name__, self.locale, len(self.plurals), len(self.singulars),
            len(self.uncountables), len(self.acronyms)
        )

    @classmethod
    def instance(cls, locale=None):
        '''.. method:: instance([locale : str]) -> Inflections

        Fetch the shared instance of the `Inflections` collection for the
        specified locale, building and seeding it on first use.

        :param str locale: The binding localization; defaults to
            :data:`DEFAULT_LOCALE`.
        :returns: The shared instance of the `Inflections` collection.
        :rtype: inflector.Inflections
        '''
        if locale is None:
            locale = DEFAULT_LOCALE

        try:
            return cls.__instances[locale]
        except KeyError:
            pass

        with cls.__instances_lock:
            if locale not in cls.__instances:
                inst = cls(locale)
                loader = cls.loaders.get(locale)
                if loader is not None:
                    loader(inst)
                log.debug('Built inflections: %r', inst)
                cls.__instances[locale] = inst
            return cls.__instances[locale]

    @classmethod
    def reset(cls, locale=None):
        '''.. method:: reset([locale : str])

        Discard the shared instance for a locale. The next call to
        :meth:`instance` builds a fresh, freshly seeded one.
        '''
        if locale is None:
            locale = DEFAULT_LOCALE

        with cls.__instances_lock:
            inst = cls.__instances.pop(locale, None)

        if inst is not None:
            log.debug('Discarded inflections: %r', inst)

    def clear(self, scope='all'):
        '''.. method:: clear([scope : str])

        Clear this instance's lists. You may specify a scope, one of `humans`,
        `plurals`, `singulars`, `uncountables`, and `all`. If not provided,
        defaults to `all`. Acronyms are never cleared.

        :param str scope: The scope to clear.
        :raises ValueError: for any other scope.
        '''
        if scope == 'all':
            scopes = self.__scopes
        elif scope in self.__scopes:
            scopes = (scope, )
        else:
            raise ValueError('Invalid scope: %r' % (scope, ))

        with self._lock:
            for name in scopes:
                setattr(self, name, [])

        log.debug('Cleared %s from inflections for locale %r', ', '.join(scopes), self.locale)

    def irregular(self, singular, plural):
        '''.. method:: irregular(singular : str, plural : str)

        Add an irregular inflection case. This applies to both pluralization
        and singularization, and only takes words, not regular expressions.

            >>> inst.irregular('octopus', 'octopi')
            >>> inst.irregular('person', 'people')
        '''
        with self._lock:
            self.countable(singular)
            self.countable(plural)

            s0, stail = singular[0], singular[1:]
            p0, ptail = plural[0], plural[1:]

            if s0.upper() == p0.upper():
                fmt = r'(%s)%s\Z'
                for x in (singular, plural):
                    pattern = fmt % (re.escape(x[0]), re.escape(x[1:]))
                    pattern = _ci_re(pattern)
                    self.plural(pattern, r'\g<1>' + ptail)
                    self.singular(pattern, r'\g<1>' + stail)
            else:
                fmt = r'%s%s\Z'
                for mod in (str.upper, str.lower):
                    for x in (singular, plural):
                        pattern = fmt % (re.escape(mod(x[0])), _ci_re(re.escape(x[1:])))
                        self.plural(pattern, mod(p0) + ptail)

                    pattern = fmt % (re.escape(mod(p0)), _ci_re(re.escape(ptail)))
                    self.singular(pattern, mod(s0) + stail)

    def acronym(self, *words):
        '''.. method:: acronym(*words : str)

        Specify new acronyms, as they should appear in a camelized string. An
        underscored string containing the acronym keeps it when passed to
        :func:`camelize`, :func:`humanize` or :func:`titleize`, and a camelized
        string containing it is turned into a single lowercase word by
        :func:`underscore`.

            >>> inst.acronym('HTML')
            >>> titleize('html')
            'HTML'
            >>> underscore('MyHTML')
            'my_html'

        The acronym must occur as a delimited unit to be recognized, so with
        only `HTTP` registered, ``camelize('https')`` is ``'Https'``.
        Alternatives are tried in the order they were first registered.
        '''
        with self._lock:
            acronyms = dict(self.acronyms)
            for word in words:
                acronyms[word.lower()] = word

            if acronyms:
                rx = '|'.join(map(re.escape, acronyms.values()))
            else:
                rx = self.__empty_pattern

            self.acronyms = acronyms
            self.acronym_regex = rx

    @property
    def acronyms_camelize_pattern(self):
        return self.__camelize_pattern % ('(?:%s)' % (self.acronym_regex, ), )

    @property
    def acronyms_underscore_pattern(self):
        return self.__underscore_pattern % (self.acronym_regex, )

    def __add(self, scope, rule, replacement):
        item = _make_rule(rule, replacement)
        with self._lock:
            if scope != 'humans':
                if isinstance(rule, str):
                    self.countable(rule)
                self.countable(replacement)

            setattr(self, scope, [item] + getattr(self, scope))
        return item

    def human(self, rule, replacement):
        '''Specify a humanized form of a string by a pattern or a literal.
        The usual :func:`humanize` formatting runs after either kind of
        replacement, so words other than acronyms come out lowercased and only
        the first letter is capitalized:

            >>> inst.human(r'_cnt$', '_count')
            >>> inst.human(Literal('legacy_col_person_name'), 'Name')
        '''
        return self.__add('humans', rule, replacement)

    def plural(self, rule, replacement):
        return self.__add('plurals', rule, replacement)

    def singular(self, rule, replacement):
        return self.__add('singulars', rule, replacement)

    def uncountable(self, *words):
        '''.. method:: uncountable(*words) -> list

        Add uncountable words that shouldn't be inflected. Accepts words and
        (nested) iterables of words.

            >>> inst.uncountable('money', ['information', ('rice', )])

        :returns: every uncountable word, in registration order.
        '''
        with self._lock:
            uncountables = list(self.uncountables)
            for word in _flatten(words):
                word = word.lower()
                if word not in uncountables:
                    uncountables.append(word)

            self.uncountables = uncountables
            return list(uncountables)

    def countable(self, word):
        search = word.lower()
        with self._lock:
            if search in self.uncountables:
                self.uncountables = [x for x in self.uncountables if x != search]

    def is_uncountable(self, word):
        match = re.search(r'(\w+)\W*\Z', word.lower())
        return match is not None and match.group(1) in self.uncountables

    def apply_inflections(self, word, rules, apply_uncountable=True, count=0):
        if not word or apply_uncountable and self.is_uncountable(word):
            return word

        # rules see the word without trailing whitespace
        stem = word.rstrip()
        tail = word[len(stem):]
        if not stem:
            return word

        for rule in rules:
            result, matches = rule.apply(stem, count)
            if matches:
                return result + tail

        return word

    def lookup_acronym(self, term):
        return self.acronyms.get(str(term).lower())


def inflections(block=None, locale=None):
    '''
    Yield the shared :class:`Inflections` instance so you can specify
    additional inflection rules. Given a callable, call it once with the
    instance, under the instance's lock, and return its result.

    Example::

        >>> inflections(lambda inflect: inflect.uncountable('rails'))
        [..., 'rails']

    Each rule registered by the callable is still put on top, so the last one
    registered is tried first.
    '''
    inst = Inflections.instance(locale)
    if block is None:
        return inst

    with inst:
        return block(inst)


def pluralize(word, locale=None):
    '''
    Return the plural form of the word in the string.

    Examples::

        >>> pluralize('post')
        'posts'
        >>> pluralize('octopus')
        'octopi'
        >>> pluralize('sheep')
        'sheep'
        >>> pluralize('CamelOctopus')
        'CamelOctopi'

    '''
    inst = Inflections.instance(locale)
    return inst.apply_inflections(word, inst.plurals)


def singularize(word, locale=None):
    '''
    Return the singular form of a word, the reverse of :func:`pluralize`.

    Examples::

        >>> singularize('posts')
        'post'
        >>> singularize('octopi')
        'octopus'
        >>> singularize('sheep')
        'sheep'
        >>> singularize('word')
        'word'
        >>> singularize('CamelOctopi')
        'CamelOctopus'

    '''
    inst = Inflections.instance(locale)
    return inst.apply_inflections(word, inst.singulars)


def camelize(string, uppercase_first_letter=True, separator=NAMESPACE_SEPARATOR, locale=None):
    '''
    Convert strings to CamelCase. Slashes become `separator`, which is useful
    for turning paths into dotted names.

    Examples::

        >>> camelize('active_model')
        'ActiveModel'
        >>> camelize('active_model', False)
        'activeModel'
        >>> camelize('active_model/errors')
        'ActiveModel.Errors'

    As a rule of thumb you can think of :func:`camelize` as the inverse of
    :func:`underscore`, though there are cases where that does not hold::

        >>> camelize(underscore('SSLError'))
        'SslError'

    '''
    inst = Inflections.instance(locale)

    def cap(text):
        return inst.lookup_acronym(text) or upcase_first(text)

    def hump(match):
        m0 = separator if match.group(1) else ''
        return m0 + cap(match.group(2))

    if uppercase_first_letter:
        string = re.sub(_ci_re(r'\A[a-z\d]*'), _transform_group(cap), string, count=1)
    else:
        string = re.sub(inst.acronyms_camelize_pattern, _match_group_lower, string, count=1)

    return re.sub(_ci_re(r'(?:_|(/))([a-z\d]*)'), hump, string)


def underscore(string, separator=NAMESPACE_SEPARATOR, locale=None):
    '''
    Make an underscored, lowercase form from the expression in the string.
    `separator` is turned into a slash.

    Examples::

        >>> underscore('ActiveModel')
        'active_model'
        >>> underscore('ActiveModel.Errors')
        'active_model/errors'

    '''
    inst = Inflections.instance(locale)

    def part(match):
        m0 = '_' if match.group(1) else ''
        return m0 + match.group(2).lower()

    if separator:
        string = string.replace(separator, '/')

    string = re.sub(inst.acronyms_underscore_pattern, part, string)
    string = re.sub(r'([A-Z\d]+)([A-Z][a-z])', r'\1_\2', string)
    string = re.sub(r'([a-z\d])([A-Z])', r'\1_\2', string)
    string = string.replace('-', '_')
    return string.lower()


def humanize(string, capitalize=True, keep_id_suffix=False, locale=None):
    '''
    Tweak an attribute name for display to end users: apply human rules,
    drop a trailing "_id", turn underscores into spaces and downcase every
    word that is not a known acronym.

    Examples::

        >>> humanize('employee_salary')
        'Employee salary'
        >>> humanize('author_id')
        'Author'
        >>> humanize('author_id', keep_id_suffix=True)
        'Author id'

    '''
    inst = Inflections.instance(locale)

    def lower(match):
        res = match.group().lower()
        return inst.lookup_acronym(res) or res

    string = inst.apply_inflections(string, inst.humans, False, count=1)
    string = re.sub(r'\A_+', '', string, count=1)
    if not keep_id_suffix:
        string = re.sub(r'_id\Z', '', string)

    string = string.replace('_', ' ')
    string = re.sub(_ci_re(r'[a-z\d]+'), lower, string)
    if capitalize:
        string = upcase_first(string)

    return string


def upcase_first(string):
    return re.sub(r'\A\w', _match_group_upper, string, count=1)


def titleize(string, keep_id_suffix=False, locale=None):
    '''
    Capitalize all the words and replace some characters in the string to
    create a nicer looking title.

    Examples::

        >>> titleize('man from the boondocks')
        'Man From The Boondocks'
        >>> titleize('x-men: the last stand')
        'X Men: The Last Stand'
        >>> titleize('TheManWithoutAPast')
        'The Man Without A Past'

    '''
    # prose full stops are not namespace separators
    string = underscore(string, separator=None, locale=locale)
    string = humanize(string, True, keep_id_suffix, locale)
    string = re.sub(r'\b(?<!\w[\'’`])[a-z]', _match_group_upper, string)
    return string


def tableize(string, locale=None):
    '''
    Create the name of a table like Rails does for models to table names.

        >>> tableize('RawScaledScorer')
        'raw_scaled_scorers'

    '''
    string = underscore(string, locale=locale)
    string = pluralize(string, locale)
    return string


def classify(string, locale=None):
    '''
    Create a class name from a plural table name, dropping any schema prefix.

        >>> classify('egg_and_hams')
        'EggAndHam'
        >>> classify('schema.posts')
        'Post'

    '''
    string = re.sub(r'.*\.', '', string)
    string = singularize(string, locale)
    string = camelize(string, True, locale=locale)
    return string


def dasherize(word):
    '''Replace underscores with dashes in the string.

    Example::

        >>> dasherize('puni_puni')
        'puni-puni'

    '''
    return word.replace('_', '-')


def denamespace(string, separator=NAMESPACE_SEPARATOR):
    '''Remove the namespace part from the expression in the string.

        >>> denamespace('inflector.Inflections')
        'Inflections'

    '''
    try:
        idx = string.rindex(separator)
    except ValueError:
        return string
    else:
        return string[idx + len(separator):]


def deconstantize(string, separator=NAMESPACE_SEPARATOR):
    try:
        idx = string.rindex(separator)
    except ValueError:
        return ''
    else:
        return string[:idx]


def foreign_key(string, separate_class_name_and_id_with_underscore=True, locale=None):
    '''
    Create a foreign key name from a class name.

        >>> foreign_key('Message')
        'message_id'
        >>> foreign_key('Message', False)
        'messageid'
        >>> foreign_key('admin.Post')
        'post_id'

    '''
    string = denamespace(string)
    string = underscore(string, locale=locale)
    if separate_class_name_and_id_with_underscore:
        string = string + '_'
    string = string + 'id'
    return string


def ordinal(number):
    '''
    Return the suffix that should be added to a number to denote the position
    in an ordered sequence such as 1st, 2nd, 3rd, 4th.

    Examples::

        >>> ordinal(1)
        'st'
        >>> ordinal(2)
        'nd'
        >>> ordinal(1002)
        'nd'
        >>> ordinal(1003)
        'rd'
        >>> ordinal(-11)
        'th'
        >>> ordinal(-1021)
        'st'

    '''
    number = abs(int(number))
    if number % 100 in (11, 12, 13):
        return 'th'
    else:
        return {
            1: 'st',
            2: 'nd',
            3: 'rd',
        }.get(number % 10, 'th')


def ordinalize(number):
    '''
    Turn a number into an ordinal string used to denote the position in an
    ordered sequence such as 1st, 2nd, 3rd, 4th.

    Examples::

        >>> ordinalize(1)
        '1st'
        >>> ordinalize(1002)
        '1002nd'
        >>> ordinalize(-11)
        '-11th'

    '''
    return '%s%s' % (number, ordinal(number))


def parameterize(string, separator='-', preserve_case=False):
    '''
    Replace special characters in a string so that it may be used as part of
    a 'pretty' URL.

        >>> parameterize('Donald E. Knuth')
        'donald-e-knuth'

    '''
    string = transliterate(string)
    string = re.sub(_ci_re(r'[^a-z0-9_-]+'), separator, string)

    if separator:
        # wrap sep in a group to allow multi-len separator ':='
        sep_re = '(?:%s)' % (re.escape(separator), )
        duplicate_sep_re = r'%s{2,}' % (sep_re, )
        leading_trailing_sep_re = r'^%s|%s$' % (sep_re, sep_re)
        string = re.sub(duplicate_sep_re, separator, string)
        string = re.sub(leading_trailing_sep_re, '', string)

    if not preserve_case:
        string = string.lower()

    return string


def transliterate(string, replacement='?'):
    '''
    Replace non-ASCII characters with an ASCII approximation, transcribing
    other scripts to Latin. If no approximation exists, the character is
    replaced by `replacement`.

    Examples::

        >>> transliterate('älämölö')
        'alamolo'
        >>> transliterate('Ærøskøbing')
        'AEroskobing'
        >>> transliterate('Привет')
        'Privet'

    '''
    return unidecode(string, errors='replace', replace_str=replacement)


def _load_english(inst):
    inst.plural(_ci_re(r'$'), r's')
    inst.plural(_ci_re(r's$'), r's')
    inst.plural(_ci_re(r'^(ax|test)is$'), r'\1es')
    inst.plural(_ci_re(r'(octop|vir)us$'), r'\1i')
    inst.plural(_ci_re(r'(octop|vir)i$'), r'\1i')
    inst.plural(_ci_re(r'(alias|status)$'), r'\1es')
    inst.plural(_ci_re(r'(bu)s$'), r'\1ses')
    inst.plural(_ci_re(r'(buffal|potat|tomat)o$'), r'\1oes')
    inst.plural(_ci_re(r'([ti])um$'), r'\1a')
    inst.plural(_ci_re(r'([ti])a$'), r'\1a')
    inst.plural(_ci_re(r'sis$'), r'ses')
    inst.plural(_ci_re(r'(?:([^f])fe|([lr])f)$'), r'\1\2ves')
    inst.plural(_ci_re(r'(hive)$'), r'\1s')
    inst.plural(_ci_re(r'([^aeiouy]|qu)y$'), r'\1ies')
    inst.plural(_ci_re(r'(x|ch|ss|sh)$'), r'\1es')
    inst.plural(_ci_re(r'(matr|vert|ind)(?:ix|ex)$'), r'\1ices')
    inst.plural(_ci_re(r'^(m|l)ouse$'), r'\1ice')
    inst.plural(_ci_re(r'^(m|l)ice$'), r'\1ice')
    inst.plural(_ci_re(r'^(ox)$'), r'\1en')
    inst.plural(_ci_re(r'^(oxen)$'), r'\1')
    inst.plural(_ci_re(r'(quiz)$'), r'\1zes')

    inst.singular(_ci_re(r's$'), r'')
    inst.singular(_ci_re(r'(ss)$'), r'\1')
    inst.singular(_ci_re(r'(n)ews$'), r'\1ews')
    inst.singular(_ci_re(r'([ti])a$'), r'\1um')
    inst.singular(_ci_re(r'((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$'), r'\1sis')
    inst.singular(_ci_re(r'(^analy)(sis|ses)$'), r'\1sis')
    inst.singular(_ci_re(r'([^f])ves$'), r'\1fe')
    inst.singular(_ci_re(r'(hive)s$'), r'\1')
    inst.singular(_ci_re(r'(tive)s$'), r'\1')
    inst.singular(_ci_re(r'([lr])ves$'), r'\1f')
    inst.singular(_ci_re(r'([^aeiouy]|qu)ies$'), r'\1y')
    inst.singular(_ci_re(r'(s)eries$'), r'\1eries')
    inst.singular(_ci_re(r'(m)ovies$'), r'\1ovie')
    inst.singular(_ci_re(r'(x|ch|ss|sh)es$'), r'\1')
    inst.singular(_ci_re(r'^(m|l)ice$'), r'\1ouse')
    inst.singular(_ci_re(r'(bus)(es)?$'), r'\1')
    inst.singular(_ci_re(r'(o)es$'), r'\1')
    inst.singular(_ci_re(r'(shoe)s$'), r'\1')
    inst.singular(_ci_re(r'(cris|test)(is|es)$'), r'\1is')
    inst.singular(_ci_re(r'^(a)x[ie]s$'), r'\1xis')
    inst.singular(_ci_re(r'(octop|vir)(us|i)$'), r'\1us')
    inst.singular(_ci_re(r'(alias|status)(es)?$'), r'\1')
    inst.singular(_ci_re(r'^(ox)en'), r'\1')
    inst.singular(_ci_re(r'(vert|ind)ices$'), r'\1ex')
    inst.singular(_ci_re(r'(matr)ices$'), r'\1ix')
    inst.singular(_ci_re(r'(quiz)zes$'), r'\1')
    inst.singular(_ci_re(r'(database)s$'), r'\1')

    inst.irregular('zombie', 'zombies')
    inst.irregular('sex', 'sexes')
    inst.irregular('person', 'people')
    inst.irregular('move', 'moves')
    inst.irregular('man', 'men')
    inst.irregular('human', 'humans')
    inst.irregular('cow', 'kine')
    inst.irregular('child', 'children')

    inst.uncountable(
        'equipment', 'fish', 'information', 'jeans', 'money', 'police', 'rice', 'series', 'sheep', 'species'
    )


Inflections.loaders[DEFAULT_LOCALE] = _load_english
