#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Lecture des parametres du moteur d'intersection par Bezier clipping.

Format : cle=valeur, une par ligne, # introduit un commentaire.
Chaque cle connue a un type fixe : entier pour les compteurs et les
bornes, flottant pour les tolerances et les fractions d'intervalle.

Usage::

    params = clip_params({'TOLERANCE': 0.001})
    params['MAX_INTERSECTIONS']   # 20

@author: Nervures
@date: 2026-10
"""

import os

# Cles dont la valeur est une fraction du domaine parametrique
_FRACTION_KEYS = ('TOLERANCE', 'STALL_BOTH', 'STALL_SINGLE', 'PROGRESS_LOW',
                  'PROGRESS_HIGH', 'CROSS_CLIP', 'MERGE_DISTANCE')
_INT_KEYS = ('MAX_INTERSECTIONS', 'MAX_ITERATIONS', 'MAX_ROOT_ITERATIONS',
             'MAX_DEGREE', 'MAX_DEPTH', 'MAX_SPLITS')
_FLOAT_KEYS = _FRACTION_KEYS + ('ZERO',)

_CFG_DIR = os.path.dirname(os.path.abspath(__file__))


def _typed_value(key, value, origin):
    """Convertit la valeur d'une cle connue dans le type de cette cle.

    :param key: nom du parametre
    :type key: str
    :param value: valeur brute (texte lu ou valeur utilisateur)
    :param origin: provenance, pour les messages d'erreur
    :type origin: str
    :returns: int ou float
    :raises KeyError: cle inconnue
    :raises ValueError: valeur non convertible
    """
    if key in _INT_KEYS:
        cast = int
    elif key in _FLOAT_KEYS:
        cast = float
    else:
        raise KeyError("%s : parametre inconnu '%s'. Disponibles : %s"
                       % (origin, key,
                          ', '.join(sorted(_INT_KEYS + _FLOAT_KEYS))))
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValueError("%s : %s attend un %s, recu %r"
                         % (origin, key, cast.__name__, value))


def load_config(filepath):
    """Charge un fichier de parametres cle=valeur.

    :param filepath: chemin du fichier .cfg
    :type filepath: str
    :returns: parametres lus, types selon la cle
    :rtype: dict
    :raises IOError: si le fichier n'existe pas
    :raises ValueError: ligne sans '=' ou valeur invalide
    :raises KeyError: cle inconnue
    """
    if not os.path.isfile(filepath):
        raise IOError("Fichier de configuration introuvable : %s" % filepath)
    params = {}
    with open(filepath, 'r') as f:
        for lineno, raw in enumerate(f, 1):
            line = raw.split('#', 1)[0].strip()
            if not line:
                continue
            origin = '%s:%d' % (os.path.basename(filepath), lineno)
            key, sep, text = line.partition('=')
            if not sep:
                raise ValueError("%s : ligne sans '=' : %r" % (origin, line))
            key = key.strip()
            params[key] = _typed_value(key, text.strip(), origin)
    return params


def load_defaults(name='bezclip'):
    """Charge defaults_<name>.cfg, livre a cote de ce module.

    :param name: suffixe du fichier de defauts
    :type name: str
    :rtype: dict
    """
    return load_config(os.path.join(_CFG_DIR, 'defaults_%s.cfg' % name))


def merge_params(defaults, user_params):
    """Surcharge les defauts par les parametres utilisateur, convertis.

    :param defaults: parametres par defaut (non modifies)
    :type defaults: dict
    :param user_params: surcharges, ex: {'MAX_DEPTH': 12}
    :type user_params: dict or None
    :returns: nouveau dictionnaire
    :rtype: dict
    :raises KeyError: cle utilisateur inconnue
    """
    merged = dict(defaults)
    for key, value in (user_params or {}).items():
        merged[key] = _typed_value(key, value, 'parametre utilisateur')
    return merged


def validate_params(params):
    """Verifie la coherence d'un jeu de parametres fusionne.

    :param params: parametres fusionnes
    :type params: dict
    :raises KeyError: cle inconnue
    :raises ValueError: valeur hors domaine
    """
    known = set(_INT_KEYS) | set(_FLOAT_KEYS)
    for key in params:
        if key not in known:
            raise KeyError("Parametre inconnu '%s'. Disponibles : %s"
                           % (key, ', '.join(sorted(known))))
    for key in _FRACTION_KEYS:
        if key not in params:
            continue
        value = float(params[key])
        if not 0.0 < value <= 1.0:
            raise ValueError("%s doit etre dans ]0, 1], recu %g"
                             % (key, value))
    for key in _INT_KEYS:
        if int(params[key]) < 1:
            raise ValueError("%s doit etre >= 1, recu %s"
                             % (key, params[key]))
    if float(params['ZERO']) <= 0.0:
        raise ValueError("ZERO doit etre > 0, recu %s" % params['ZERO'])
    if params['PROGRESS_LOW'] >= params['PROGRESS_HIGH']:
        raise ValueError("PROGRESS_LOW (%g) doit etre < PROGRESS_HIGH (%g)"
                         % (params['PROGRESS_LOW'], params['PROGRESS_HIGH']))


def clip_params(user_params=None):
    """Parametres du moteur : defauts + surcharges utilisateur, valides.

    ``MERGE_DISTANCE`` vaut ``TOLERANCE`` s'il n'est pas fourni.

    :param user_params: surcharges (cles en majuscules, ex: 'TOLERANCE')
    :type user_params: dict or None
    :returns: parametres complets
    :rtype: dict
    """
    params = merge_params(load_defaults(), user_params)
    params.setdefault('MERGE_DISTANCE', params['TOLERANCE'])
    validate_params(params)
    return params
