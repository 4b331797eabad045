import jsonpickle
import jsonpickle.ext.numpy as jsonpickle_numpy


jsonpickle.set_preferred_backend("json")
jsonpickle.set_encoder_options("json", sort_keys=True)


def dumps(data, **kwargs):
    jsonpickle.set_encoder_options("json", **kwargs)
    return jsonpickle.encode(data, keys=False)


def loads(data, **kwargs):
    jsonpickle.set_decoder_options("json", **kwargs)
    return jsonpickle.decode(data, keys=False)


def dump(data, filename, **kwargs):
    with open(filename, "w") as f:
        f.write(dumps(data, **kwargs))


def load(filename, **kwargs):
    with open(filename, "r") as f:
        return loads(f.read(), **kwargs)


jsonpickle_numpy.register_handlers()
