# -*- coding: utf-8 -*-
import re
import xml.etree.ElementTree as ET


class object_dict(dict):
    """
    object view of dict, you can
    >>> a = object_dict()
    >>> a.fish = 'fish'
    >>> a['fish']
    'fish'
    >>> a['water'] = 'water'
    >>> a.water
    'water'
    >>> a.status = object_dict({'value': 'GREEN'})
    >>> a.status
    'GREEN'
    """
    def __init__(self, initd=None):
        if initd is None:
            initd = {}
        dict.__init__(self, initd)

    def __getattr__(self, item):
        if item.startswith('__'):
            raise AttributeError(item)
        try:
            d = self.__getitem__(item)
        except KeyError:
            return None

        # if value is the only key in object, you can omit it
        if isinstance(d, dict) and 'value' in d and len(d) == 1:
            return d['value']
        else:
            return d

    def __setattr__(self, item, value):
        self.__setitem__(item, value)

    def getvalue(self, item, value=None):
        """
        Returns the text of a leaf node, or ``value`` when the node is missing.

        Args:
            item (`str`): child tag name
            value: default

        Returns:
            `str`
        """
        node = self.get(item)
        if node is None:
            return value
        if isinstance(node, dict):
            return node.get('value', '')
        return node

    def getlist(self, item):
        """
        Repeated tags parse to a list and single tags to a dict; this always
        returns a list.
        """
        node = self.get(item)
        if node is None:
            return []
        if isinstance(node, list):
            return node
        return [node]


class xml2dict(object):

    def __init__(self):
        pass

    def _parse_node(self, node):
        node_tree = object_dict()
        # Save attrs and text, hope there will not be a child with same name
        if node.text and node.text.strip():
            node_tree.value = node.text.strip()
        for (k, v) in list(node.attrib.items()):
            k, v = self._namespace_split(k, object_dict({'value': v}))
            node_tree[k] = v
        # Save childrens
        for child in list(node):
            tag, tree = self._namespace_split(child.tag, self._parse_node(child))
            if tag not in node_tree:  # the first time, so store it in dict
                node_tree[tag] = tree
                continue
            old = node_tree[tag]
            if not isinstance(old, list):
                node_tree.pop(tag)
                node_tree[tag] = [old]  # multi times, so change old dict to a list
            node_tree[tag].append(tree)  # add the new one

        return node_tree

    def _namespace_split(self, tag, value):
        """
        Split the tag '{http://mws.amazonservices.com/doc/2009-01-01/}Status'
            ns = http://mws.amazonservices.com/doc/2009-01-01/
            name = Status
        """
        result = re.compile(r"\{(.*)\}(.*)").search(tag)
        if result:
            value.namespace, tag = result.groups()

        return (tag, value)

    def parse(self, file):
        """parse a xml file to a dict"""
        with open(file, 'r') as f:
            return self.fromstring(f.read())

    def fromstring(self, s):
        """parse a string"""
        t = ET.fromstring(s)
        root_tag, root_tree = self._namespace_split(t.tag, self._parse_node(t))
        return object_dict({root_tag: root_tree})
