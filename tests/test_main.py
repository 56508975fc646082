from wsdlgen.main import main

from conftest import data


def test_prints_classes(capsys):
    assert main(['wsdlgen', '-i', data('users.wsdl'), '-n', 'users']) == 0
    out = capsys.readouterr().out
    assert 'class Employee(Person):' in out
    assert 'abstract class Person:' in out
    assert 'class UserService:' in out
    assert '    def GetEmployee(parameters: GetEmployee) -> GetEmployeeResponse' in out


def test_input_required(capsys):
    assert main(['wsdlgen']) == 1
    assert 'Usage: wsdlgen' in capsys.readouterr().out


def test_help(capsys):
    assert main(['wsdlgen', '-h']) == 1
    assert 'Usage' in capsys.readouterr().out


def test_bad_option(capsys):
    assert main(['wsdlgen', '-x']) == 1


def test_load_error(capsys):
    assert main(['wsdlgen', '-i', data('broken.wsdl')]) == 1
    err = capsys.readouterr().err
    assert 'wsdlgen: Unable to load WSDL' in err
