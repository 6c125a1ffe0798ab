"""
Tests for the rule store: registration, precedence and clearing of rules.
"""
import re
import threading

import pytest

from inflector import (
    Inflections,
    Literal,
    LiteralRule,
    Rule,
    inflections,
    pluralize,
    singularize,
)


class TestInstance:
    def test_instance_is_shared(self):
        assert isinstance(Inflections.instance(), Inflections)
        assert Inflections.instance() is Inflections.instance()
        assert Inflections.instance('en') is Inflections.instance()

    def test_locales_get_separate_instances(self, english, bare):
        assert bare is not english
        assert bare.locale != english.locale
        assert bare.plurals == []
        assert bare.singulars == []
        assert bare.uncountables == []

    def test_english_is_seeded(self, english):
        assert english.plurals
        assert english.singulars
        assert 'sheep' in english.uncountables
        assert english.acronyms == {}

    def test_reset_builds_a_fresh_instance(self, english):
        english.uncountable('rails')
        Inflections.reset()

        fresh = Inflections.instance()
        assert fresh is not english
        assert 'rails' not in fresh.uncountables

    def test_context_manager_yields_instance(self, english):
        with english as inst:
            inst.acronym('HTTP')
        assert inst is english
        assert english.lookup_acronym('http') == 'HTTP'


class TestAcronym:
    def test_acronym(self, bare):
        bare.acronym('McDonald')
        assert bare.acronyms['mcdonald'] == 'McDonald'
        assert bare.lookup_acronym('MCDONALD') == 'McDonald'
        assert bare.lookup_acronym('donald') is None

    def test_regex_follows_registration_order(self, bare):
        assert bare.acronym_regex == '(?=a)b'

        bare.acronym('McDonald')
        bare.acronym('SSL', 'HTTP')
        assert bare.acronym_regex == 'McDonald|SSL|HTTP'

    def test_reregistering_replaces_canonical_form(self, bare):
        bare.acronym('Api')
        bare.acronym('API')
        assert bare.acronyms == {'api': 'API'}
        assert bare.acronym_regex == 'API'

    def test_acronyms_are_escaped(self, bare):
        bare.acronym('C++')
        assert re.search(bare.acronym_regex, 'C++')
        assert not re.search(bare.acronym_regex, 'CC')


class TestRules:
    def test_plural(self, english):
        english.plural('fish', 'fishies')
        assert 'fish' not in english.uncountables
        assert english.plurals[0] == Rule('fish', 'fishies')

    def test_singular(self, english):
        english.singular(Literal('fish'), 'one fish')
        assert 'fish' not in english.uncountables
        assert english.singulars[0] == LiteralRule('fish', 'one fish')

    def test_replacement_is_made_countable(self, english):
        english.plural('sheeps', 'sheep')
        assert 'sheep' not in english.uncountables

    def test_compiled_pattern_keeps_uncountables(self, english):
        english.plural(re.compile('sheep$'), 'sheeps')
        assert 'sheep' in english.uncountables

    def test_new_rules_go_on_top(self, bare):
        first = bare.plural('$', 's')
        second = bare.plural('^(ox)$', r'\1en')
        assert bare.plurals == [second, first]

        assert pluralize('ox', bare.locale) == 'oxen'
        assert pluralize('box', bare.locale) == 'boxs'

    def test_literal_rule_matches_whole_trailing_word(self, bare):
        bare.plural(Literal('fish'), 'fishies')

        assert pluralize('fish', bare.locale) == 'fishies'
        assert pluralize('FISH', bare.locale) == 'fishies'
        assert pluralize('red fish', bare.locale) == 'red fishies'
        assert pluralize('catfish', bare.locale) == 'catfish'

    def test_pattern_rule_matches_anywhere(self, bare):
        bare.plural('fish', 'fishies')
        assert pluralize('catfish', bare.locale) == 'catfishies'

    def test_literal_replacement_is_verbatim(self, bare):
        bare.plural(Literal('fish'), r'\1fish')
        assert pluralize('fish', bare.locale) == r'\1fish'

    def test_no_match_returns_input(self, bare):
        bare.plural('^(ox)$', r'\1en')
        assert pluralize('dog', bare.locale) == 'dog'

    def test_malformed_pattern_fails_when_used(self, bare):
        rule = bare.plural('(unclosed', 'x')
        assert bare.plurals == [rule]

        with pytest.raises(re.error):
            pluralize('word', bare.locale)

        assert bare.plurals == [rule]
        assert singularize('word', bare.locale) == 'word'


class TestIrregular:
    def test_irregular_is_countable(self, bare):
        bare.uncountable('person', 'people', 'cow', 'kine')

        bare.irregular('person', 'people')
        assert 'person' not in bare.uncountables
        assert 'people' not in bare.uncountables

        bare.clear()
        bare.uncountable('cow', 'kine')

        bare.irregular('cow', 'kine')
        assert 'cow' not in bare.uncountables
        assert 'kine' not in bare.uncountables

    def test_shared_first_letter(self, bare):
        bare.irregular('person', 'people')
        assert len(bare.plurals) == 2
        assert len(bare.singulars) == 2

        assert pluralize('person', bare.locale) == 'people'
        assert pluralize('Person', bare.locale) == 'People'
        assert pluralize('people', bare.locale) == 'people'
        assert singularize('people', bare.locale) == 'person'
        assert singularize('People', bare.locale) == 'Person'
        assert singularize('salespeople', bare.locale) == 'salesperson'

    def test_different_first_letter(self, bare):
        bare.irregular('cow', 'kine')
        assert len(bare.plurals) == 4
        assert len(bare.singulars) == 2

        assert pluralize('cow', bare.locale) == 'kine'
        assert pluralize('Cow', bare.locale) == 'Kine'
        assert pluralize('kine', bare.locale) == 'kine'
        assert pluralize('Kine', bare.locale) == 'Kine'
        assert singularize('kine', bare.locale) == 'cow'
        assert singularize('Kine', bare.locale) == 'Cow'


class TestUncountable:
    def test_uncountable(self, bare):
        words = ['equipment', 'information', 'rice', 'money', 'species', 'series', 'fish', 'sheep', 'jeans', 'police']

        uncountables = bare.uncountable(words)
        assert bare.uncountables == words
        assert uncountables == words

        bare.clear()

        uncountables = bare.uncountable('equipment', 'information', ['rice', ('money', 'species')])
        assert bare.uncountables == ['equipment', 'information', 'rice', 'money', 'species']
        assert uncountables == bare.uncountables

    def test_uncountable_is_lowercased_and_deduplicated(self, bare):
        assert bare.uncountable('Rice', 'rice', 'RICE') == ['rice']

    def test_is_uncountable_checks_last_word(self, english):
        assert english.is_uncountable('sheep')
        assert english.is_uncountable('SHEEP')
        assert english.is_uncountable('black sheep')
        assert english.is_uncountable('sheep ')
        assert english.is_uncountable('sheep.')
        assert not english.is_uncountable('sheepdog')
        assert not english.is_uncountable('')

    def test_countable(self, english):
        english.countable('Sheep')
        assert 'sheep' not in english.uncountables
        assert pluralize('sheep') == 'sheeps'


class TestHuman:
    def test_human(self, bare):
        rule = bare.human('legacy_col_person_name', 'Name')
        assert bare.humans == [Rule('legacy_col_person_name', 'Name')]
        assert rule == ('legacy_col_person_name', 'Name')

        bare.clear()

        bare.human(r'_cnt$', '_count')
        assert bare.humans == [Rule(r'_cnt$', '_count')]

    def test_human_keeps_uncountables(self, english):
        english.human('sheep', 'Sheep')
        assert 'sheep' in english.uncountables


class TestClear:
    def test_clear(self, bare):
        assert not bare.plurals
        assert not bare.singulars
        assert not bare.uncountables
        assert not bare.humans

        bare.human('legacy_col_person_name', 'Name')
        bare.irregular('cow', 'kine')

        assert bare.plurals
        assert bare.singulars
        assert bare.humans

        bare.clear()

        assert not bare.plurals
        assert not bare.singulars
        assert not bare.uncountables
        assert not bare.humans

        bare.uncountable('information')
        assert bare.uncountables

        bare.clear('uncountables')
        assert not bare.uncountables

    def test_clear_single_scope(self, english):
        singulars = english.singulars
        english.clear('plurals')

        assert english.plurals == []
        assert english.singulars == singulars
        assert english.uncountables

    def test_clear_leaves_acronyms(self, english):
        english.acronym('SSL')
        english.clear('all')
        assert english.acronyms == {'ssl': 'SSL'}

    @pytest.mark.parametrize('scope', ['acronyms', 'everything', ''])
    def test_invalid_scope(self, english, scope):
        with pytest.raises(ValueError):
            english.clear(scope)


class TestCustomization:
    def test_inflections_without_block(self, english):
        assert inflections() is english

    def test_inflections_returns_block_result(self):
        result = inflections(lambda inflect: inflect.uncountable('rails'))
        assert 'rails' in result
        assert singularize('rails') == 'rails'

    def test_rules_added_later_win(self):
        assert pluralize('cactus') == 'cactus'

        inflections(lambda inflect: inflect.plural(r'(?i:(cact)us$)', r'\1i'))
        assert pluralize('cactus') == 'cacti'

    def test_last_rule_of_a_batch_wins(self):
        def customize(inflect):
            inflect.plural(r'(?i:(cact)us$)', r'\1i')
            inflect.plural(r'(?i:(cact)us$)', r'\1uses')

        inflections(customize)
        assert pluralize('cactus') == 'cactuses'

    def test_concurrent_registration(self, english):
        errors = []

        def register():
            for n in range(200):
                english.plural(r'(?i:zz%d)$' % n, 'zz')
                english.acronym('ZZ%d' % n)

        def read():
            try:
                for _ in range(200):
                    assert pluralize('book') == 'books'
            except Exception as exc:  # collected for the main thread
                errors.append(exc)

        threads = [threading.Thread(target=register)]
        threads.extend(threading.Thread(target=read) for _ in range(4))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
