from spellscope import user_dictionary as ud


def test_load_missing_dictionary(tmp_path):
    assert ud.load_user_words("en-US", tmp_path) == []


def test_save_sorts_and_dedupes(tmp_path):
    path = ud.save_user_words("en-US", ["zeta", "Alpha", "zeta", "  ", "beta"], tmp_path)
    assert path == tmp_path / "en-US_User.dic"
    assert path.read_text(encoding="utf-8").splitlines() == ["Alpha", "beta", "zeta"]


def test_add_and_remove_word(tmp_path):
    assert ud.add_word("fr-FR", "bonjour", tmp_path) is True
    assert ud.add_word("fr-FR", "bonjour", tmp_path) is False
    assert ud.load_user_words("fr-FR", tmp_path) == ["bonjour"]

    assert ud.remove_word("fr-FR", "bonjour", tmp_path) is True
    assert ud.remove_word("fr-FR", "bonjour", tmp_path) is False
    assert ud.load_user_words("fr-FR", tmp_path) == []


def test_import_words_filters():
    text = "Hello, world! ab x2y2 html5 hello-world Hello\tnew_word e-mail@host.com"
    assert ud.import_words(text, existing=["world"]) == ["Hello", "hello", "new", "word", "mail", "host", "com"]


def test_import_and_export_file(tmp_path):
    source = tmp_path / "words.txt"
    source.write_text("alpha beta; gamma, alpha", encoding="utf-8")
    ud.save_user_words("en-US", ["beta"], tmp_path)

    assert ud.import_file("en-US", source, tmp_path) == ["alpha", "gamma"]
    assert ud.load_user_words("en-US", tmp_path) == ["alpha", "beta", "gamma"]

    exported = ud.export_words("en-US", tmp_path / "out.dic", tmp_path)
    assert exported.read_text(encoding="utf-8").splitlines() == ["alpha", "beta", "gamma"]
