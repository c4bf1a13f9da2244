from edsh.value import NULL, Kind, ScalarType, Value, infer_type


def test_infer_type():
    assert infer_type('true') == ScalarType.BOOL
    assert infer_type('False') == ScalarType.BOOL
    assert infer_type('12') == ScalarType.INT
    assert infer_type('-3') == ScalarType.INT
    assert infer_type('1.5') == ScalarType.FLOAT
    assert infer_type('1e3') == ScalarType.FLOAT
    assert infer_type('(1,0,1)') == ScalarType.STRING
    assert infer_type('') == ScalarType.STRING


def test_scalar():
    value = Value.scalar('10')
    assert value.kind == Kind.SCALAR
    assert value.scalar_type == ScalarType.INT
    assert value.python == 10
    assert str(value) == '10'

    assert Value.scalar(True).python is True
    assert Value.scalar(2.5).python == 2.5
    assert Value.scalar('abc').python == 'abc'


def test_null():
    assert Value.null() is NULL
    assert NULL.is_null
    assert NULL.python is None
    assert str(NULL) == 'null'
    assert not NULL


def test_objects():
    class Obj:
        def __init__(self, name):
            self.name = name

    a, b = Obj('a'), Obj('b')
    value = Value.objects([a, b])
    assert value.kind == Kind.OBJECTS
    assert len(value) == 2
    assert str(value) == 'a\nb'
    assert value.to_string(lambda obj: obj.name.upper()) == 'A\nB'
    assert value.python == [a, b]

    assert not Value.objects([])


def test_of():
    assert Value.of(None) is NULL
    assert Value.of('x').kind == Kind.SCALAR
    assert Value.of(['a', 'b']).kind == Kind.STRINGS
    assert str(Value.of(['a', 'b'])) == 'a\nb'

    obj = object()
    assert Value.of(obj).items == (obj,)
    assert Value.of([obj]).kind == Kind.OBJECTS

    value = Value.scalar(1)
    assert Value.of(value) is value
